from __future__ import annotations

from .guard import Allow, Guard, NavigationDecision, RedirectTo, evaluate_navigation, session_guard
from .location import Location
from .router import RouteNotFound, Router
from .routes import LOGIN, LOGIN_ROUTE_NAME, ROUTES, Route, page_path

__all__ = [
    "Allow",
    "Guard",
    "LOGIN",
    "LOGIN_ROUTE_NAME",
    "Location",
    "NavigationDecision",
    "ROUTES",
    "RedirectTo",
    "Route",
    "RouteNotFound",
    "Router",
    "evaluate_navigation",
    "page_path",
    "session_guard",
]
