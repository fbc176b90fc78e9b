import logging

import streamlit as st

from src.memory_match.adapters.kv_store_json import JsonFileStore
from src.memory_match.adapters.session_store_streamlit import StSessionStore
from src.memory_match.domain import LEVEL_LABELS, total_pairs
from src.memory_match.services import app_state, gameplay
from src.memory_match.services.config_loader import get_app_title, get_leaderboard_path
from src.memory_match.ui.board import handle_click, render_board
from src.memory_match.ui.sidebar import render_sidebar
from src.memory_match.ui.status import render_status
from src.memory_match.ui.win_dialog import render_win_dialog


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@st.cache_resource
def get_leaderboard_store() -> JsonFileStore:
    """全セッションで共有するランキングの保存先。"""
    return JsonFileStore(get_leaderboard_path())


def main():
    configure_logging()
    title = get_app_title()
    st.set_page_config(page_title=title, page_icon="🧠", layout="wide")
    st.title(title)

    try:
        store = StSessionStore()
        app_state.initialize_state(store)
        kv = get_leaderboard_store()
    except Exception as e:
        logging.getLogger(__name__).exception("Initialization failed")
        st.error(f"初期化に失敗しました: {e}")
        return

    # サイドバー: 設定 UI とランキング
    render_sidebar(store, kv)

    state = app_state.get_round(store)
    st.caption(
        f"{LEVEL_LABELS.get(state.level, state.level)}・{total_pairs(state)}ペア。"
        "同じ絵柄のカードを2枚そろえましょう。"
    )

    # ステータス表示（定期実行で経過時間と不一致表示の解除を進める）
    render_status(store)

    # 盤面
    st.divider()
    render_board(state, lambda position: handle_click(store, position))

    # クリア時の結果ダイアログ（表示要求は一度で消費する）
    if store.get("show_win_dialog"):
        gameplay.dismiss_win_dialog(store)
        st.balloons()
        render_win_dialog(store, kv)
