from __future__ import annotations

from datetime import datetime

import pandas as pd
import streamlit as st

from src.memory_match.adapters.session_store_streamlit import StSessionStore
from src.memory_match.app.ports.kv_store import KeyValueStore
from src.memory_match.domain import LEVEL_LABELS, LEVELS, LeaderboardEntry
from src.memory_match.services import leaderboard


def render_leaderboard(store: StSessionStore, kv: KeyValueStore) -> None:
    """レベル別ランキング（上位5件）を描画する。

    - 表示中のレベルは lb_level（レベル変更・クリア時に追従）。
    - 消去は確認チェックを入れたときだけ実行できる。
    """
    st.subheader("ランキング")
    levels = list(LEVELS)
    current = store.get("lb_level") or levels[0]
    shown = st.radio(
        "表示するレベル",
        options=levels,
        index=levels.index(current) if current in levels else 0,
        format_func=lambda k: LEVEL_LABELS.get(k, k),
        horizontal=True,
        label_visibility="collapsed",
    )
    store.set("lb_level", shown)

    entries = leaderboard.load(kv, shown)
    if not entries:
        st.caption("まだ記録がありません。一番乗りを目指しましょう！")
    else:
        st.dataframe(entries_to_frame(entries), hide_index=True, use_container_width=True)

    confirm = st.checkbox(
        f"{LEVEL_LABELS.get(shown, shown)}の記録を消去する（元に戻せません）",
        key=f"lb-confirm-{shown}",
    )
    if st.button("ランキングを消去", disabled=not confirm or not entries, key=f"lb-clear-{shown}"):
        leaderboard.clear(kv, shown)
        st.rerun()


def entries_to_frame(entries: list[LeaderboardEntry]) -> pd.DataFrame:
    """ランキングを表示用の DataFrame に変換する（順位は 1 始まり）。"""
    rows = [
        {
            "順位": i + 1,
            "名前": e.name,
            "スコア": e.score,
            "手数": e.moves,
            "時間(秒)": e.time,
            "日時": datetime.fromtimestamp(e.timestamp / 1000).strftime("%Y-%m-%d %H:%M")
            if e.timestamp
            else "-",
        }
        for i, e in enumerate(entries)
    ]
    return pd.DataFrame(rows, columns=["順位", "名前", "スコア", "手数", "時間(秒)", "日時"])
