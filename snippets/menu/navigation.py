"""Route table and navigator for the side-menu app.

A navigation state is a path such as ``"view1"`` or ``"view1/some/params"``.
The registered route that is the longest prefix of the state picks the view;
whatever follows it is handed to the view as parameters.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple, Type

from snippets.infra.exceptions import RouteNotFoundError
from snippets.infra.logging import get_logger
from snippets.menu.views import DefaultView, View, View1, View2, ViewChangeEvent

logger = get_logger(__name__)


class Route(str, Enum):
    DEFAULT = ""
    VIEW1 = "view1"
    VIEW2 = "view2"


@dataclass(frozen=True)
class MenuEntry:
    label: str
    target: Optional[Route] = None

    @property
    def is_link(self) -> bool:
        return self.target is not None


MENU = (
    MenuEntry("Menu"),
    MenuEntry("View 1", Route.VIEW1),
    MenuEntry("View 2", Route.VIEW2),
)


class RouteTable:
    def __init__(self, views: Mapping[Route, Type[View]]) -> None:
        if Route.DEFAULT not in views:
            raise RouteNotFoundError("The default route must be registered", route=Route.DEFAULT.value)
        self._views: Dict[Route, Type[View]] = dict(views)

    def __iter__(self):
        return iter(self._views)

    def view_type(self, route: Route) -> Type[View]:
        return self._views[route]

    def resolve(self, path: str, *, strict: bool = False) -> Tuple[Route, str]:
        """Map a navigation state to ``(route, parameters)``.

        Unregistered states fall back to the default route unless ``strict``.
        """
        state = (path or "").strip("/")
        best: Optional[Route] = None
        for route in self._views:
            name = route.value
            if not name:
                continue
            if state == name or state.startswith(name + "/"):
                if best is None or len(name) > len(best.value):
                    best = route
        if best is not None:
            return best, state[len(best.value):].strip("/")
        if not state:
            return Route.DEFAULT, ""
        if strict:
            raise RouteNotFoundError(f"No view registered for {state!r}", route=state)
        logger.warning("No view registered for %r, showing the default view", state)
        return Route.DEFAULT, ""


def default_route_table() -> RouteTable:
    return RouteTable({
        Route.DEFAULT: DefaultView,
        Route.VIEW1: View1,
        Route.VIEW2: View2,
    })


class ViewContainer:
    """Holds at most one mounted view."""

    def __init__(self) -> None:
        self._view: Optional[View] = None

    @property
    def active_view(self) -> Optional[View]:
        return self._view

    def replace(self, view: View) -> Optional[View]:
        old, self._view = self._view, view
        return old

    def __len__(self) -> int:
        return 0 if self._view is None else 1


class Navigator:
    def __init__(self, container: ViewContainer, routes: Optional[RouteTable] = None) -> None:
        self.container = container
        self.routes = routes or default_route_table()
        self.current_route = Route.DEFAULT
        self.parameters = ""

    @property
    def state(self) -> str:
        if self.parameters:
            return f"{self.current_route.value}/{self.parameters}"
        return self.current_route.value

    def navigate_to(self, path: str) -> View:
        """Mount a fresh instance of the view registered for ``path``."""
        route, parameters = self.routes.resolve(path)
        view = self.routes.view_type(route)()
        view.enter(ViewChangeEvent(self.container.active_view, view, route, parameters))
        self.container.replace(view)
        old_state = self.state
        self.current_route = route
        self.parameters = parameters
        logger.info("navigated %r -> %r", old_state, self.state)
        return view

    def start(self, path: Optional[str] = None) -> View:
        """Initial navigation: the request path designates the route, else the default."""
        return self.navigate_to(path or "")

    def sync(self, path: str) -> View:
        """Navigate only if ``path`` is not what is already mounted.

        Streamlit reruns the page on every interaction; this keeps the mounted
        view across reruns of the same route.
        """
        route, parameters = self.routes.resolve(path)
        active = self.container.active_view
        if active is None or (route, parameters) != (self.current_route, self.parameters):
            return self.navigate_to(path)
        return active
