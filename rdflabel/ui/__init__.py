"""Streamlit application shell."""

from __future__ import annotations


def render_app() -> None:
    import streamlit as st

    # set_page_config() must run before any other streamlit command
    st.set_page_config(page_title="RDF Label Explorer", layout="wide")

    from rdflabel.ui.sidebar import init_session_state, render_sidebar
    from rdflabel.ui.tabs import render_tabs

    init_session_state()
    sidebar_state = render_sidebar()
    render_tabs(sidebar_state)
