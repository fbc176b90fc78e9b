from __future__ import annotations

from collections.abc import Callable
from html import escape as html_escape

import streamlit as st

from src.memory_match.adapters.session_store_streamlit import StSessionStore
from src.memory_match.domain import Card, Face, RoundState, grid_columns, is_image_content, total_pairs
from src.memory_match.services.gameplay import handle_card_click as _svc_handle_card_click

_TILE_STYLE = (
    "display:flex;align-items:center;justify-content:center;height:96px;"
    "border-radius:12px;background:#ffffff;border:1px solid #e6e6e6;"
)


def render_board(state: RoundState, on_click: Callable[[int], None]) -> None:
    """盤面を描画し、裏向きカードのクリックで on_click(position) を呼び出す。"""
    cols_dim = grid_columns(total_pairs(state))
    cards = state.cards
    for start in range(0, len(cards), cols_dim):
        cols = st.columns(cols_dim)
        for offset, card in enumerate(cards[start : start + cols_dim]):
            with cols[offset]:
                if card.face is Face.HIDDEN:
                    # ロック中は押せないようにする（押されてもサービス側で無視される）
                    if st.button(
                        "？",
                        key=f"card-{card.position}",
                        use_container_width=True,
                        disabled=state.locked or state.finished,
                    ):
                        on_click(card.position)
                        st.rerun()
                else:
                    st.markdown(_face_html(card), unsafe_allow_html=True)


def _face_html(card: Card) -> str:
    """表向きカードの HTML。そろったカードは薄く表示する。"""
    opacity = "0.45" if card.face is Face.MATCHED else "1"
    if is_image_content(card.content):
        inner = (
            f'<img src="{html_escape(card.content)}" alt="card image" '
            'style="height:88px;width:88px;object-fit:contain;" />'
        )
    else:
        inner = f'<span style="font-size:2.6rem;">{html_escape(card.content)}</span>'
    return f'<div style="{_TILE_STYLE}opacity:{opacity};">{inner}</div>'


def handle_click(store: StSessionStore, position: int) -> None:
    """カードクリック時の処理をサービスに委譲する。"""
    _svc_handle_card_click(store, position)
