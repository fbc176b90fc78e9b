from __future__ import annotations

import logging

from src.memory_match.app.ports.kv_store import KeyValueStore
from src.memory_match.domain import LEADERBOARD_KEY_PREFIX, LeaderboardEntry, pair_count, rank_entries

logger = logging.getLogger(__name__)

# レベルごとのランキング（上位5件）の読み書き。保存先は KeyValueStore 経由。


def _key(level: str) -> str:
    # 未定義レベルはここで弾く
    pair_count(level)
    return f"{LEADERBOARD_KEY_PREFIX}{level}"


def load(store: KeyValueStore, level: str) -> list[LeaderboardEntry]:
    """保存済みのランキングを返す。未保存・破損時は空リスト。

    - 個々の行が壊れている場合はその行だけを捨てる。
    - 保存値が上位5件・整列済みでなくても、読み出し時に整える。
    """
    raw = store.get(_key(level))
    if raw is None:
        return []
    if not isinstance(raw, list):
        logger.warning("Leaderboard for %s is not a list; treating as empty", level)
        return []
    entries: list[LeaderboardEntry] = []
    for item in raw:
        try:
            entries.append(LeaderboardEntry.from_dict(item))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping corrupt leaderboard entry for %s: %s", level, e)
    return rank_entries(entries)


def submit(store: KeyValueStore, level: str, entry: LeaderboardEntry) -> list[LeaderboardEntry]:
    """成績を追加し、並べ替えて上位5件に切り詰めて保存する。保存後の一覧を返す。"""
    entries = rank_entries([*load(store, level), entry])
    store.set(_key(level), [e.to_dict() for e in entries])
    logger.info(
        "Submitted score for %s: name=%s score=%d moves=%d time=%d (rank=%s)",
        level,
        entry.name,
        entry.score,
        entry.moves,
        entry.time,
        entries.index(entry) + 1 if entry in entries else "-",
    )
    return entries


def clear(store: KeyValueStore, level: str) -> None:
    """レベルのランキングを空にして保存する。"""
    store.set(_key(level), [])
    logger.info("Cleared leaderboard for %s", level)


def qualifies(store: KeyValueStore, level: str, score: int, moves: int, time: int) -> bool:
    """この成績が現在のランキングに入るかを返す（名前入力の案内用）。"""
    probe = LeaderboardEntry(name="", score=score, moves=moves, time=time, timestamp=0)
    return probe in rank_entries([*load(store, level), probe])
