from .navigation import MENU, MenuEntry, Navigator, Route, RouteTable, ViewContainer, default_route_table
from .views import DefaultView, View, View1, View2, ViewChangeEvent

__all__ = [
    "MENU",
    "MenuEntry",
    "Navigator",
    "Route",
    "RouteTable",
    "ViewContainer",
    "default_route_table",
    "DefaultView",
    "View",
    "View1",
    "View2",
    "ViewChangeEvent",
]
