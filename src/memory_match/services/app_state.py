from __future__ import annotations

import logging
import random

from src.memory_match.app.ports.session_store import SessionStore
from src.memory_match.app.state import Settings, load_settings
from src.memory_match.domain import RoundState, new_round, pair_count

logger = logging.getLogger(__name__)


def initialize_state(store: SessionStore) -> None:
    """アプリ起動時に必要なセッション状態を初期化する。

    既に存在するキーは上書きせず、未定義のときのみ初期値を設定する。
    """
    if store.get("settings") is None:
        store.set("settings", load_settings())
    if store.get("round") is None:
        reset_game(store)
    if store.get("lb_level") is None:
        store.set("lb_level", get_settings(store).level)


def get_settings(store: SessionStore) -> Settings:
    settings = store.get("settings")
    if isinstance(settings, Settings):
        return settings
    return Settings()


def get_round(store: SessionStore) -> RoundState:
    return store.get("round")


def reset_game(
    store: SessionStore,
    level: str | None = None,
    use_images: bool | None = None,
    rng: random.Random | None = None,
) -> RoundState:
    """ラウンドを作り直す（リスタート・レベル変更・モード変更の共通処理）。

    引数が指定されれば設定を更新してから使い、未指定のときは現在の設定値を用いる。
    以前のラウンド状態は丸ごと置き換える（保留中の不一致表示や計時も破棄される）。
    未定義レベルは ValueError とし、設定もラウンドも変更しない。
    """
    settings = get_settings(store)
    level_val = level if level is not None else settings.level
    images_val = bool(use_images) if use_images is not None else settings.use_images
    pair_count(level_val)

    state = new_round(level_val, images_val, rng)
    store.set("settings", Settings(level=level_val, use_images=images_val))
    store.set("round", state)
    store.set("show_win_dialog", False)
    store.set("score_saved", False)
    logger.debug("New round: level=%s images=%s cards=%d", level_val, images_val, len(state.cards))
    return state
