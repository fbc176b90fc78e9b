from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from src.memory_match.domain.constants import LEVELS, SYMBOL_POOL
from src.memory_match.domain.imagery import generate_svg_data, pick_colors


class Face(str, Enum):
    """カードの表示状態。"""

    HIDDEN = "hidden"
    REVEALED = "revealed"
    MATCHED = "matched"


@dataclass
class Card:
    """盤面上の1枚のカード。

    現状の契約:
    - position: 0 始まりの配置順（カードの識別子を兼ねる）
    - content: 絵文字、または画像モードでは SVG の data URL
    - face: 表示状態。MATCHED のカードはもう選択できない
    """

    position: int
    content: str
    face: Face = Face.HIDDEN


def pair_count(level: str) -> int:
    """レベルのペア数を返す。未定義のレベルは ValueError。"""
    try:
        return LEVELS[level]
    except KeyError:
        raise ValueError(f"Unknown level: {level!r}") from None


def grid_columns(pairs: int) -> int:
    """盤面の列数。8 ペアまでは 4 列、それ以上は 6 列。"""
    return 4 if pairs <= 8 else 6


def build_deck(level: str, use_images: bool = False, rng: random.Random | None = None) -> list[Card]:
    """レベルに応じた山札を作る。

    - 絵柄プールから重複なしで pairCount 個を選び、それぞれ2枚ずつにする。
    - 並びは一様シャッフル（Fisher-Yates）。
    - 画像モードでは絵柄ごとに1回だけ画像を生成し、ペアの2枚で共有する。
    """
    rng = rng or random.Random()
    pairs = pair_count(level)
    if len(SYMBOL_POOL) < pairs:
        raise ValueError(f"Symbol pool too small for level {level!r}: {len(SYMBOL_POOL)} < {pairs}")

    symbols = rng.sample(SYMBOL_POOL, pairs)
    if use_images:
        colors = pick_colors(pairs)
        contents = [generate_svg_data(s, colors[i]) for i, s in enumerate(symbols)]
    else:
        contents = list(symbols)

    items = [c for c in contents for _ in range(2)]
    rng.shuffle(items)
    return [Card(position=i, content=item) for i, item in enumerate(items)]
