from __future__ import annotations

from typing import Callable, Dict

import streamlit as st
from streamlit.navigation.page import StreamlitPage

from snippets.menu.navigation import MENU, Navigator, Route, RouteTable, ViewContainer
from snippets.web.framework.state import get_or_create

NAVIGATOR_KEY = "side_menu_navigator"


def get_navigator() -> Navigator:
    return get_or_create(NAVIGATOR_KEY, lambda: Navigator(ViewContainer()))


def _mount(route: Route) -> Callable[[], None]:
    def mount() -> None:
        get_navigator().sync(route.value).render()

    mount.__name__ = f"mount_{route.name.lower()}"
    return mount


def build_pages(routes: RouteTable) -> Dict[Route, StreamlitPage]:
    """One st.Page per registered route; the empty route is the default page."""
    pages = {}
    for route in routes:
        title = routes.view_type(route).title
        if route is Route.DEFAULT:
            pages[route] = st.Page(_mount(route), title=title, default=True)
        else:
            pages[route] = st.Page(_mount(route), title=title, url_path=route.value)
    return pages


def render() -> None:
    navigator = get_navigator()
    pages = build_pages(navigator.routes)
    current = st.navigation(list(pages.values()), position="hidden")

    menu, view_container = st.columns([1, 4])
    with menu:
        for entry in MENU:
            if entry.is_link:
                st.page_link(pages[entry.target], label=entry.label)
            else:
                st.subheader(entry.label)
    with view_container:
        current.run()
