from __future__ import annotations

import streamlit as st

from src.memory_match.adapters.session_store_streamlit import StSessionStore
from src.memory_match.app.ports.kv_store import KeyValueStore
from src.memory_match.domain import final_stats
from src.memory_match.services import app_state, gameplay, leaderboard


@st.dialog("クリア！")
def render_win_dialog(store: StSessionStore, kv: KeyValueStore) -> None:
    """クリア時の結果表示と名前入力。

    ダイアログ内の操作はダイアログだけが再実行される。
    保存・閉じるではアプリ全体を再実行してダイアログを閉じる。
    """
    state = app_state.get_round(store)
    if state is None:
        return
    stats = final_stats(state)
    c1, c2, c3 = st.columns(3)
    c1.metric("スコア", stats["score"])
    c2.metric("手数", stats["moves"])
    c3.metric("時間", f"{stats['time']}s")

    if leaderboard.qualifies(kv, state.level, stats["score"], stats["moves"], stats["time"]):
        st.success("ランキング入りです！ 名前を入力して保存しましょう。")

    name = st.text_input("名前", max_chars=32, placeholder="Anonymous")
    b1, b2 = st.columns(2)
    with b1:
        if st.button("保存", type="primary", use_container_width=True):
            gameplay.save_score(store, kv, name)
            st.rerun()
    with b2:
        if st.button("閉じる", use_container_width=True):
            gameplay.dismiss_win_dialog(store)
            st.rerun()
