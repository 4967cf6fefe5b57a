from __future__ import annotations

from typing import Callable, TypeVar

import streamlit as st

T = TypeVar("T")


def get_or_create(key: str, factory: Callable[[], T]) -> T:
    """Per-session singleton: build with ``factory`` on first access."""
    if key not in st.session_state:
        st.session_state[key] = factory()
    return st.session_state[key]
