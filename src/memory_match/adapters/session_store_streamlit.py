"""Streamlit セッション状態アダプタ。

目的:
- ブラウザのタブごとのラウンド状態・設定を `st.session_state` に保持する。
- アプリ層ポート `SessionStore` の実装を提供する（サービス層は Streamlit を知らない）。
"""

from __future__ import annotations

from typing import Any

import streamlit as st

from src.memory_match.app.ports.session_store import SessionStore


class StSessionStore(SessionStore):
    """Streamlit 実装の SessionStore。"""

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401 - UI 橋渡しのため Any 許容
        return st.session_state.get(key, default)

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401 - UI 橋渡しのため Any 許容
        st.session_state[key] = value
