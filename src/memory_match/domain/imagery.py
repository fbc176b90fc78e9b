from __future__ import annotations

import base64
from functools import lru_cache

from src.memory_match.domain.constants import PALETTE

_SVG_TEMPLATE = """<svg xmlns='http://www.w3.org/2000/svg' width='400' height='400'>
  <defs>
    <linearGradient id='g' x1='0' x2='1' y1='0' y2='1'>
      <stop offset='0' stop-color='__COLOR__' stop-opacity='1'/>
      <stop offset='1' stop-color='#ffffff' stop-opacity='0.05'/>
    </linearGradient>
  </defs>
  <rect rx='60' width='100%' height='100%' fill='url(#g)'/>
  <text x='50%' y='52%' font-size='160' text-anchor='middle' dominant-baseline='middle' font-family='Arial' fill='rgba(0,0,0,0.7)'>__LABEL__</text>
</svg>"""


@lru_cache(maxsize=64)
def generate_svg_data(label: str, color: str) -> str:
    """絵柄と色から SVG を生成し、data URL（base64）として返す。

    - 同じ (label, color) には同一の文字列を返す（ペアの2枚で共有する）。
    - lru_cache で絵柄ごとの結果をメモリキャッシュ。
    """
    svg = _SVG_TEMPLATE.replace("__COLOR__", color).replace("__LABEL__", label)
    b64 = base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return "data:image/svg+xml;base64," + b64


def pick_colors(n: int) -> list[str]:
    """n 個分の色をパレットから順に返す（不足時は先頭から繰り返す）。"""
    return [PALETTE[i % len(PALETTE)] for i in range(n)]


def is_image_content(content: str) -> bool:
    """カード内容が画像（data URL）かどうかを返す。"""
    return content.startswith("data:image/")
