from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import asdict, dataclass, field
from typing import Any

from src.memory_match.domain.constants import DEFAULT_PLAYER_NAME, LEADERBOARD_SIZE


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class LeaderboardEntry:
    """ランキングの1行。

    現状の契約:
    - time は経過秒、timestamp は登録時刻（epoch ミリ秒）
    """

    name: str
    score: int
    moves: int
    time: int
    timestamp: int = field(default_factory=_now_ms)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> LeaderboardEntry:
        """保存形式から復元する。型が合わない場合は ValueError/TypeError。

        - 旧形式の "date" キーも timestamp として受け付ける。
        """
        if not isinstance(raw, dict):
            raise TypeError(f"expected dict, got {type(raw).__name__}")
        ts = raw.get("timestamp", raw.get("date", 0))
        return cls(
            name=str(raw["name"]),
            score=int(raw["score"]),
            moves=int(raw["moves"]),
            time=int(raw["time"]),
            timestamp=int(ts or 0),
        )


def sort_key(entry: LeaderboardEntry) -> tuple[int, int, int]:
    """得点の降順、手数の昇順、時間の昇順。"""
    return (-entry.score, entry.moves, entry.time)


def rank_entries(entries: Iterable[LeaderboardEntry], limit: int = LEADERBOARD_SIZE) -> list[LeaderboardEntry]:
    """並べ替えて上位 limit 件を返す（同順位は登録順を保つ）。"""
    return sorted(entries, key=sort_key)[:limit]


def normalize_name(raw: str | None) -> str:
    """入力名の前後空白を除去し、空なら既定名を返す。"""
    name = (raw or "").strip()
    return name or DEFAULT_PLAYER_NAME
