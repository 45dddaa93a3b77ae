from __future__ import annotations

from dataclasses import dataclass

LOGIN_ROUTE_NAME = "Login"


@dataclass(frozen=True)
class Route:
    path: str
    name: str | None = None
    requires_auth: bool = True
    redirect: str | None = None


LOGIN = Route(path="/login", name=LOGIN_ROUTE_NAME, requires_auth=False)

ROUTES: tuple[Route, ...] = (
    LOGIN,
    Route(path="/", redirect="/domains"),
    Route(path="/domains", name="Domains"),
    Route(path="/accounts", name="Accounts"),
    Route(path="/logs", name="Logs"),
)


def page_path(path: str) -> str:
    """``/accounts/4/delete`` belongs to the ``/accounts`` page."""

    segment = path.strip("/").split("/", 1)[0]
    return f"/{segment}" if segment else "/"
