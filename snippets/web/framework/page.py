from __future__ import annotations

from dataclasses import dataclass
import streamlit as st

from snippets.config import Settings, load_settings
from snippets.infra.logging import configure_logging


@dataclass(frozen=True)
class PageSpec:
    title: str
    icon: str
    layout: str = "wide"
    sidebar_state: str = "collapsed"


def init_page(spec: PageSpec, settings: Settings | None = None) -> Settings:
    """Initialize a snippet page and return the active settings.

    NOTE: This must be called before any other Streamlit command on a page.
    """
    st.set_page_config(
        page_title=spec.title,
        page_icon=spec.icon,
        layout=spec.layout,
        initial_sidebar_state=spec.sidebar_state,
    )
    settings = settings or load_settings()
    configure_logging(settings)
    return settings


__all__ = ["PageSpec", "init_page"]
