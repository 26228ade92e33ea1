"""
Streamlit main app for the usePopcorn movie tracker.

Run: streamlit run popcorn/ui/app.py
"""

import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

import streamlit as st

from popcorn.config import get_log_level
from popcorn.ui.components.movie_card import render_search_results, render_watched_list
from popcorn.ui.components.movie_detail import render_movie_detail
from popcorn.ui.components.watched_summary import render_watched_summary
from popcorn.ui.utils.omdb_client import search_movies
from popcorn.ui.utils.session_state import get_controller, init_session_state, select_movie
from popcorn.utils.logging_config import configure_ui_logging

if "logging_configured" not in st.session_state:
    configure_ui_logging(level=get_log_level())
    st.session_state["logging_configured"] = True

init_session_state()
controller = get_controller()

# The open movie owns the page title while it is shown
st.set_page_config(
    page_title=controller.title.value,
    page_icon="🍿",
    layout="wide",
)

st.title("🍿 usePopcorn")
query = st.text_input("Search movies...", key="query", label_visibility="collapsed",
                      placeholder="Search movies...")

search = search_movies(query)
st.markdown(f"Found **{len(search.results)}** results")

left, right = st.columns(2)

with left:
    with st.container(border=True):
        if search.error:
            st.error(f"⛔️ {search.error}")
        else:
            render_search_results(search.results, on_select=select_movie,
                                  selected_id=controller.selected_id)

with right:
    with st.container(border=True):
        if controller.selected_id:
            render_movie_detail(controller.detail, on_close=controller.deselect)
        else:
            render_watched_summary(controller.summary())
            render_watched_list(controller.store.records, on_delete=controller.remove_watched)
