from __future__ import annotations

import logging
import time

from src.memory_match.app.ports.kv_store import KeyValueStore
from src.memory_match.app.ports.session_store import SessionStore
from src.memory_match.domain import LeaderboardEntry, PickResult, final_stats, normalize_name, pick
from src.memory_match.domain import tick as _tick_round
from src.memory_match.services import leaderboard
from src.memory_match.services.app_state import get_round, get_settings, reset_game

logger = logging.getLogger(__name__)

# UI コンポーネントからのイベント（カード選択、設定変更、成績保存等）を受け取り、
# セッション状態の更新とドメイン操作を一箇所に集約する。
# 本モジュールは UI フレームワークに依存しない。状態アクセスは SessionStore 経由で行う。


def handle_card_click(store: SessionStore, position: int, now: float | None = None) -> PickResult:
    """カード選択時の処理を行う。

    振る舞い:
    - 先に期限切れの遅延処理を消化する（不一致表示の期限が過ぎていればロック解除）。
    - ドメインの pick() に委譲し、クリアしたら勝利ダイアログを開く。
    """
    state = get_round(store)
    if state is None:
        return PickResult.IGNORED
    now_ts = time.time() if now is None else now
    _tick_round(state, now_ts)
    result = pick(state, position, now_ts)
    if result is PickResult.WON:
        stats = final_stats(state)
        logger.info(
            "Round won: level=%s score=%d moves=%d time=%d",
            state.level,
            stats["score"],
            stats["moves"],
            stats["time"],
        )
        store.set("show_win_dialog", True)
        store.set("lb_level", state.level)
    store.set("round", state)
    return result


def tick(store: SessionStore, now: float | None = None) -> bool:
    """定期実行から呼ばれ、遅延処理を消化する。盤面が変わったら True。"""
    state = get_round(store)
    if state is None:
        return False
    changed = _tick_round(state, time.time() if now is None else now)
    store.set("round", state)
    return changed


def on_level_change(store: SessionStore, level: str) -> None:
    """レベル変更時は新しい山札で開始し直し、ランキング表示も合わせる。"""
    if level == get_settings(store).level:
        return
    reset_game(store, level=level)
    store.set("lb_level", level)


def on_images_toggle(store: SessionStore, use_images: bool) -> None:
    """画像モードの切替時は新しい山札で開始し直す。"""
    if bool(use_images) == get_settings(store).use_images:
        return
    reset_game(store, use_images=bool(use_images))


def save_score(store: SessionStore, kv: KeyValueStore, name: str | None) -> list[LeaderboardEntry] | None:
    """クリアしたラウンドの成績をランキングに登録し、ダイアログを閉じる。

    - 未クリアのラウンドや、同じラウンドでの2回目の登録は何もしない（None を返す）。
    """
    state = get_round(store)
    if state is None or not state.finished or store.get("score_saved"):
        return None
    stats = final_stats(state)
    entry = LeaderboardEntry(
        name=normalize_name(name),
        score=stats["score"],
        moves=stats["moves"],
        time=stats["time"],
    )
    entries = leaderboard.submit(kv, state.level, entry)
    store.set("score_saved", True)
    store.set("show_win_dialog", False)
    return entries


def dismiss_win_dialog(store: SessionStore) -> None:
    store.set("show_win_dialog", False)
