"""
Watched list summary component.
"""

import streamlit as st

from popcorn.models.watched import WatchedSummary


def render_watched_summary(summary: WatchedSummary) -> None:
    """Render count and averages of the watched list."""
    st.subheader("Movies you watched")
    col1, col2, col3, col4 = st.columns(4)
    col1.markdown(f"#️⃣ {summary.count} movies")
    col2.markdown(f"⭐️ {summary.mean_external_rating:.1f}")
    col3.markdown(f"🌟 {summary.mean_user_rating:.1f}")
    col4.markdown(f"⏳ {summary.mean_runtime_minutes:.0f} min")
