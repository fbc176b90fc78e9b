from __future__ import annotations

import streamlit as st

from src.memory_match.adapters.session_store_streamlit import StSessionStore
from src.memory_match.app.ports.kv_store import KeyValueStore
from src.memory_match.domain import LEVEL_LABELS, LEVELS
from src.memory_match.services import app_state
from src.memory_match.services.gameplay import on_images_toggle as _svc_on_images_toggle
from src.memory_match.services.gameplay import on_level_change as _svc_on_level_change
from src.memory_match.ui.leaderboard import render_leaderboard


def render_sidebar(store: StSessionStore, kv: KeyValueStore) -> None:
    """サイドバーの設定 UI とランキングを描画する。

    - レベル変更・画像モード切替は即座に新しいラウンドを開始する。
    - リスタートは現在の設定のまま山札を作り直す。
    """
    settings = app_state.get_settings(store)
    levels = list(LEVELS)
    with st.sidebar:
        st.subheader("ゲーム設定")
        level = st.selectbox(
            "レベル",
            options=levels,
            index=levels.index(settings.level),
            format_func=lambda k: f"{LEVEL_LABELS.get(k, k)}（{LEVELS[k]}ペア）",
        )
        use_images = st.toggle("画像モード", value=settings.use_images)
        if level != settings.level:
            _svc_on_level_change(store, level)
            st.rerun()
        if use_images != settings.use_images:
            _svc_on_images_toggle(store, use_images)
            st.rerun()
        if st.button("リスタート", use_container_width=True):
            app_state.reset_game(store)
            st.rerun()

        st.divider()
        render_leaderboard(store, kv)
