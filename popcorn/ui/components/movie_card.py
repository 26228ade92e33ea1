"""
Movie list components: search results and watched movies.
"""

from typing import Callable, Sequence

import streamlit as st

from popcorn.models.movie import Candidate
from popcorn.models.watched import WatchedRecord


def _poster(url: str) -> None:
    if url and url != "N/A":
        st.image(url, width=60)


def render_search_results(
    movies: Sequence[Candidate],
    on_select: Callable[[str], None],
    selected_id: str | None = None,
) -> None:
    """
    Render search hits; clicking one selects it (or closes it if open).

    Args:
        movies: Search hits
        on_select: Callback(movie_id)
        selected_id: Currently selected movie, highlighted
    """
    for movie in movies:
        col1, col2 = st.columns([1, 4])
        with col1:
            _poster(movie.poster)
        with col2:
            st.button(
                f"**{movie.title}**" + ("  ◀" if movie.id == selected_id else ""),
                key=f"select_{movie.id}",
                on_click=on_select,
                args=(movie.id,),
                type="tertiary",
            )
            st.caption(f"🗓 {movie.year}")


def render_watched_list(
    records: Sequence[WatchedRecord],
    on_delete: Callable[[str], bool],
) -> None:
    """
    Render watched movies with a delete button each.

    Args:
        records: Watched list, in insertion order
        on_delete: Callback(movie_id)
    """
    for record in records:
        col1, col2, col3 = st.columns([1, 4, 1])
        with col1:
            _poster(record.poster)
        with col2:
            st.markdown(f"**{record.title}**")
            st.caption(
                f"⭐️ {record.external_rating}  🌟 {record.user_rating}  ⏳ {record.runtime_minutes} min"
            )
        with col3:
            st.button("X", key=f"delete_{record.id}", on_click=on_delete, args=(record.id,))
