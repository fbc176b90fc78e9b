from __future__ import annotations

import streamlit as st

from src.memory_match.adapters.session_store_streamlit import StSessionStore
from src.memory_match.domain import total_pairs
from src.memory_match.services import app_state, gameplay

# 不一致表示の解除（0.7 秒）に追従できる程度の間隔で再実行する
STATUS_POLL_SEC = 0.25


@st.fragment(run_every=STATUS_POLL_SEC)
def render_status(store: StSessionStore) -> None:
    """得点・手数・経過時間を表示する。

    - 定期実行のたびに遅延処理（tick）を消化する。
    - 不一致表示が解除されたら盤面を描き直すためにアプリ全体を再実行する。
    """
    if gameplay.tick(store):
        st.rerun()

    state = app_state.get_round(store)
    if state is None:
        return
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("スコア", state.score)
    with c2:
        st.metric("手数", state.moves)
    with c3:
        st.metric("時間", f"{state.elapsed}s")
    with c4:
        st.metric("ペア", f"{state.matches}/{total_pairs(state)}")
