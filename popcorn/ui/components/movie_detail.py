"""
Movie detail view component.
"""

import streamlit as st

from popcorn.core.detail import DetailLifecycle, DetailStatus
from popcorn.ui.components.rating_widget import render_rating_widget


def render_movie_detail(lifecycle: DetailLifecycle, on_close) -> None:
    """
    Render the open movie: loader, error, or detail with its rating section.

    Args:
        lifecycle: Detail state for the selected movie
        on_close: Callback() for the back button
    """
    st.button("←", key="detail_back", on_click=on_close)

    if lifecycle.status == DetailStatus.LOADING:
        st.write("Loading...")
        return
    if lifecycle.status == DetailStatus.FAILED:
        st.error(f"⛔️ {lifecycle.error}")
        return

    movie = lifecycle.detail
    if movie is None:
        return

    col1, col2 = st.columns([1, 2])
    with col1:
        if movie.poster and movie.poster != "N/A":
            st.image(movie.poster, caption=f"Poster of {movie.title} movie")
    with col2:
        st.header(movie.title)
        st.write(f"{movie.released} • {movie.runtime}")
        st.write(movie.genre)
        st.write(f"⭐️ {movie.imdb_rating} IMDb rating")

    with st.container(border=True):
        if lifecycle.is_rated:
            st.write(f"You have rated the movie {lifecycle.watched_rating} ⭐️")
        else:
            st.write("Rate and add to your watched list")
            render_rating_widget(lifecycle.rating_widget, key_prefix=lifecycle.movie_id)
            if lifecycle.can_add:
                st.button("+ Add to Watched List", key="detail_add", on_click=lifecycle.add_to_watched)

    st.markdown(f"*{movie.plot}*")
    st.write(f"Starring {movie.actors}")
    st.write(f"Directed by {movie.director}")
