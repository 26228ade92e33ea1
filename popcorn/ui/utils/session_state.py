"""
Session state helpers for Streamlit.
"""

import asyncio

import streamlit as st

from popcorn.config import get_app_title, get_database_path, get_rating_max, get_watched_key
from popcorn.core.selection import SelectionController
from popcorn.core.title import DocumentTitle
from popcorn.core.watched import WatchedStore
from popcorn.database.connection import get_db_manager
from popcorn.database.storage import KeyValueStore
from popcorn.ui.utils.omdb_client import fetch_movie_detail


def build_controller() -> SelectionController:
    """Create a controller backed by the configured database."""
    db_manager = get_db_manager(db_path=get_database_path())
    db_manager.create_tables()
    store = WatchedStore(KeyValueStore(db_manager), key=get_watched_key())
    return SelectionController(
        store,
        fetch_movie_detail,
        title=DocumentTitle(get_app_title()),
        rating_max=get_rating_max(),
    )


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    if "controller" not in st.session_state:
        st.session_state["controller"] = build_controller()
    if "query" not in st.session_state:
        st.session_state["query"] = ""


def get_controller() -> SelectionController:
    """Get the session's selection controller."""
    return st.session_state["controller"]


def select_movie(movie_id: str) -> None:
    """Select (or toggle off) a movie and wait for its detail to load."""
    controller = get_controller()

    async def _select() -> None:
        task = controller.select(movie_id)
        if task is not None:
            await task

    asyncio.run(_select())
