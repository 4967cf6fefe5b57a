from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import streamlit as st

if TYPE_CHECKING:
    from snippets.menu.navigation import Route


@dataclass(frozen=True)
class ViewChangeEvent:
    old_view: Optional["View"]
    new_view: "View"
    route: "Route"
    parameters: str = ""


class View:
    """Content that can be mounted into the view container."""

    title: str = ""
    text: str = ""

    def __init__(self) -> None:
        self.parameters = ""

    def enter(self, event: ViewChangeEvent) -> None:
        """Called by the navigator right before the view is mounted."""
        self.parameters = event.parameters

    def render(self) -> None:
        st.header(self.title)
        st.write(self.text)
        if self.parameters:
            st.caption(f"Parameters: {self.parameters}")


class DefaultView(View):
    title = "Default view"
    text = "Pick a view from the menu."


class View1(View):
    title = "View 1"
    text = "This is view 1."


class View2(View):
    title = "View 2"
    text = "This is view 2."
