"""The pre-navigation check that keeps protected pages behind a session.

The guard only asks whether a token is present. Whether that token is still
accepted by the backend is found out later, when a request made with it comes
back 401 and the gateway evicts it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Union

from ..core.session import SessionContext
from .routes import LOGIN, Route


@dataclass(frozen=True)
class Allow:
    pass


@dataclass(frozen=True)
class RedirectTo:
    route: Route


NavigationDecision = Union[Allow, RedirectTo]
Guard = Callable[[Route, Optional[Route]], NavigationDecision]


def evaluate_navigation(target: Route, session: SessionContext) -> NavigationDecision:
    if target.requires_auth and not session.is_authenticated:
        return RedirectTo(LOGIN)
    return Allow()


def session_guard(session: SessionContext) -> Guard:
    """Bind ``evaluate_navigation`` to a session for ``Router.before_each``."""

    def guard(target: Route, current: Optional[Route]) -> NavigationDecision:
        return evaluate_navigation(target, session)

    return guard
