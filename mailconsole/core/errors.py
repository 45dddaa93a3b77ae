from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlsplit

import httpx
from fastapi import Request
from fastapi.responses import RedirectResponse
from starlette import status

from ..navigation.routes import page_path


class GuardRedirect(Exception):
    """Raised by page dependencies when the navigation guard refuses entry."""

    def __init__(self, location: str) -> None:
        super().__init__(location)
        self.location = location


def extract_error_message(payload: Any, fallback: str) -> str:
    """Return the backend's ``error`` text, or ``fallback`` when there is none."""

    if isinstance(payload, Mapping):
        message = payload.get("error")
        if isinstance(message, str) and message:
            return message
    return fallback


def _return_path(request: Request) -> str:
    referer = request.headers.get("referer")
    if referer:
        path = urlsplit(referer).path
        if path and path != request.url.path:
            return path
    return page_path(request.url.path)


async def guard_redirect_handler(request: Request, exc: GuardRedirect):
    # An absent token is a precondition, not a failure: no notification.
    return RedirectResponse(url=exc.location, status_code=status.HTTP_302_FOUND)


async def gateway_error_handler(request: Request, exc: httpx.HTTPError):
    """Turn a failed backend call into the page the operator should see next.

    The gateway has already queued the notification. A 401 has already
    evicted the token, so the operator goes to the login page. Other
    failures on a form post return to the page the form came from; a failed
    page load renders the error page instead of looping on itself.
    """

    console = request.app.state.console
    if isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code == status.HTTP_401_UNAUTHORIZED:
        return RedirectResponse(url=console.location.href, status_code=status.HTTP_302_FOUND)
    if request.method != "GET":
        return RedirectResponse(url=_return_path(request), status_code=status.HTTP_303_SEE_OTHER)
    code = status.HTTP_504_GATEWAY_TIMEOUT if isinstance(exc, httpx.TimeoutException) else status.HTTP_502_BAD_GATEWAY
    return console.render(request, "error.html", {}, status_code=code)
