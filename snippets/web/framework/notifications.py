from __future__ import annotations

from typing import Callable, Optional

import streamlit as st

from snippets.infra.logging import get_logger

logger = get_logger(__name__)


def show_notification(text: str, icon: Optional[str] = None) -> None:
    """Transient, auto-dismissing message."""
    logger.debug("notification: %s", text)
    st.toast(text, icon=icon)


def notifier(icon: Optional[str] = None) -> Callable[[str], None]:
    def notify(text: str) -> None:
        show_notification(text, icon=icon)
    return notify
