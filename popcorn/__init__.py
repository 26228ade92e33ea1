"""
usePopcorn movie tracker package.

This package contains the interactive core (rating widget, detail lifecycle,
watched list), data models, persistence, and the Streamlit UI.
"""

__version__ = "1.0.0"
