from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .guard import Guard, RedirectTo
from .routes import Route

logger = logging.getLogger(__name__)


class RouteNotFound(LookupError):
    """No console route matches the requested path."""


# A guard redirect that lands on another guarded redirect more than this many
# times is a misconfigured guard, not a navigation.
MAX_REDIRECTS = 10


class Router:
    """Path resolution plus explicitly registered pre-navigation guards."""

    def __init__(self, routes: Iterable[Route]) -> None:
        self._routes = {route.path: route for route in routes}
        self._guards: List[Guard] = []
        self.current: Optional[Route] = None

    def before_each(self, guard: Guard) -> Guard:
        self._guards.append(guard)
        return guard

    def resolve(self, path: str) -> Route:
        seen = set()
        normalized = path.rstrip("/") or "/"
        route = self._routes.get(normalized)
        while route is not None and route.redirect:
            if route.path in seen:
                raise RouteNotFound(path)
            seen.add(route.path)
            route = self._routes.get(route.redirect)
        if route is None:
            raise RouteNotFound(path)
        return route

    def push(self, path: str) -> Route:
        """Navigate to ``path`` and return the route actually entered."""

        target = self.resolve(path)
        for _ in range(MAX_REDIRECTS):
            redirected = self._run_guards(target)
            if redirected is None:
                self.current = target
                return target
            logger.debug(
                "navigation.redirected",
                extra={"extra_data": {"from": target.path, "to": redirected.path}},
            )
            target = redirected
        raise RuntimeError(f"Too many guard redirects while navigating to {path}")

    def reset(self, _href: str | None = None) -> None:
        self.current = None

    def _run_guards(self, target: Route) -> Optional[Route]:
        for guard in self._guards:
            decision = guard(target, self.current)
            if isinstance(decision, RedirectTo):
                return decision.route
        return None
