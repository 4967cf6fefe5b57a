"""Streamlit UI snippets: a grid with a clickable icon column and a side menu."""

__version__ = "0.1.0"
