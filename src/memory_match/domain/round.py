"""1ラウンド分の進行（めくり・判定・ロック・計時）を扱う状態機械。

状態: 未開始 -> 1枚目待ち -> 2枚目待ち -> (不一致表示中) -> 1枚目待ち | クリア

- UI には依存しない。時刻は呼び出し側から now（epoch 秒）で渡す。
- 遅延処理（不一致の裏返し、経過時間の更新）は resolve_at / started_at を
  状態に持ち、tick() で消化する。リスタートは状態ごと作り直すので予定も破棄される。
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum

from src.memory_match.domain.constants import MATCH_SCORE, MISMATCH_DELAY_SEC, MISMATCH_PENALTY, TICK_SEC
from src.memory_match.domain.deck import Card, Face, build_deck, pair_count


class PickResult(str, Enum):
    """pick() の結果。UI 側の描画判断に使う。"""

    IGNORED = "ignored"
    FIRST = "first"
    MATCH = "match"
    MISMATCH = "mismatch"
    WON = "won"


@dataclass
class RoundState:
    """ラウンドの状態。

    現状の契約:
    - first/second は選択中カードの position（未選択は None）
    - locked は不一致表示中のみ True（resolve_at に戻す予定時刻を持つ）
    - elapsed は経過秒（整数）。started_at が None の間は計時していない
    - finished はクリア済み。以後の pick はすべて無視する
    """

    level: str
    use_images: bool
    cards: list[Card] = field(default_factory=list)
    first: int | None = None
    second: int | None = None
    locked: bool = False
    matches: int = 0
    moves: int = 0
    score: int = 0
    elapsed: int = 0
    started_at: float | None = None
    resolve_at: float | None = None
    finished: bool = False


def new_round(level: str, use_images: bool = False, rng: random.Random | None = None) -> RoundState:
    """新しい山札でラウンドを作る。未定義レベルは ValueError（山札は作らない）。"""
    cards = build_deck(level, use_images, rng)
    return RoundState(level=level, use_images=use_images, cards=cards)


def total_pairs(state: RoundState) -> int:
    return pair_count(state.level)


def is_won(state: RoundState) -> bool:
    return state.finished


def timer_running(state: RoundState) -> bool:
    return state.started_at is not None and not state.finished


def pick(state: RoundState, position: int, now: float) -> PickResult:
    """カードを1枚めくる。

    振る舞い:
    - ロック中・クリア後・存在しない/表でないカードは無視する。
    - 1枚目: 表にして記録。ラウンド最初のめくりで計時を開始する。
    - 2枚目: 手数を加算。一致なら得点加算して確定、不一致なら減点してロック。
    """
    if state.locked or state.finished:
        return PickResult.IGNORED
    if position < 0 or position >= len(state.cards):
        return PickResult.IGNORED
    card = state.cards[position]
    if card.face is not Face.HIDDEN:
        return PickResult.IGNORED

    if state.started_at is None:
        state.started_at = now

    card.face = Face.REVEALED
    if state.first is None:
        state.first = position
        return PickResult.FIRST

    state.second = position
    state.moves += 1
    first = state.cards[state.first]

    if first.content == card.content:
        first.face = Face.MATCHED
        card.face = Face.MATCHED
        state.matches += 1
        state.score += MATCH_SCORE
        _clear_selection(state)
        if state.matches == total_pairs(state):
            _update_elapsed(state, now)
            state.finished = True
            return PickResult.WON
        return PickResult.MATCH

    state.score = max(0, state.score - MISMATCH_PENALTY)
    state.locked = True
    state.resolve_at = now + MISMATCH_DELAY_SEC
    return PickResult.MISMATCH


def resolve_mismatch(state: RoundState) -> None:
    """不一致の2枚を裏に戻し、選択とロックを解除する。"""
    for pos in (state.first, state.second):
        if pos is not None and state.cards[pos].face is Face.REVEALED:
            state.cards[pos].face = Face.HIDDEN
    _clear_selection(state)


def tick(state: RoundState, now: float) -> bool:
    """予定済みの遅延処理を消化する。

    - 期限を過ぎた不一致表示を戻す（戻したら True を返す）。
    - 計時中なら経過秒を更新する。
    """
    changed = False
    if state.locked and state.resolve_at is not None and now >= state.resolve_at:
        resolve_mismatch(state)
        changed = True
    if timer_running(state):
        _update_elapsed(state, now)
    return changed


def final_stats(state: RoundState) -> dict[str, int]:
    """ランキング登録用の最終成績 (score, moves, time)。"""
    return {"score": state.score, "moves": state.moves, "time": state.elapsed}


def _clear_selection(state: RoundState) -> None:
    state.first = None
    state.second = None
    state.locked = False
    state.resolve_at = None


def _update_elapsed(state: RoundState, now: float) -> None:
    if state.started_at is None:
        return
    # TICK_SEC ごとに 1 進む計時と同じ値（端数は切り捨て）
    state.elapsed = max(0, int(math.floor((now - state.started_at) / TICK_SEC)))
