"""Page-level entry point of the navigation guard.

Every protected router depends on ``require_ui_session``. It hands the
requested page to the console ``Router``; when the registered guard sends the
navigation elsewhere (no token: the login page; ``/``: the domains page) the
handler is never run and the browser is redirected instead.
"""

from __future__ import annotations

from fastapi import Depends, Request

from ..core.errors import GuardRedirect
from ..navigation import Route, page_path
from .console import Console, get_console


async def require_ui_session(request: Request, console: Console = Depends(get_console)) -> Route:
    requested = page_path(request.url.path)
    entered = console.router.push(requested)
    if entered.path != requested:
        raise GuardRedirect(entered.path)
    return entered
