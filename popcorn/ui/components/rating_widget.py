"""
Star rating widget component.
"""

import streamlit as st

from popcorn.core.rating import RatingWidget

FULL_STAR = "★"
EMPTY_STAR = "☆"


def render_rating_widget(widget: RatingWidget, key_prefix: str) -> None:
    """
    Render one button per star; clicking a star commits it.

    Streamlit has no hover events, so the preview is never set here.

    Args:
        widget: Widget state (kept in session state between reruns)
        key_prefix: Unique prefix for the button keys, e.g. the movie id
    """
    columns = st.columns(widget.max_rating + 1)
    for column, position, full in zip(columns, widget.positions, widget.stars()):
        with column:
            st.button(
                FULL_STAR if full else EMPTY_STAR,
                key=f"{key_prefix}_star_{position}",
                on_click=widget.click,
                args=(position,),
                help=f"{position} star{'s' if position > 1 else ''}",
            )
    with columns[-1]:
        label = widget.label
        if label:
            st.markdown(f"<span style='color:{widget.color}'>{label}</span>", unsafe_allow_html=True)
