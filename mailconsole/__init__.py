"""Application factory and top-level wiring for the mail forwarding console.

``create_app`` builds the pieces of the authenticated session boundary once
per process and hands them to the page routers through ``app.state.console``:

* one ``SessionContext`` over the persisted ``token`` key;
* one ``RequestGateway`` that every view uses to reach the backend API;
* one ``Router`` with the session guard registered via ``before_each``;
* one ``Location`` whose reloads discard the router position and any queued
  notifications, like a full page load would.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from .core.config import ConsoleSettings, get_settings
from .core.errors import GuardRedirect, gateway_error_handler, guard_redirect_handler
from .core.jinja import get_templates
from .core.session import PersistentStore, SessionContext
from .deps.console import Console
from .i18n import LocalePreference
from .middlewares import NoStoreHeadersMiddleware, RequestIdMiddleware
from .navigation import ROUTES, Location, Router, session_guard
from .services.gateway import DEFAULT_TIMEOUT_MS, RequestGateway
from .services.notifications import NotificationCenter

logger = logging.getLogger(__name__)


def build_console(settings: ConsoleSettings, transport: httpx.AsyncBaseTransport | None = None) -> Console:
    if settings.API_TIMEOUT_MS != DEFAULT_TIMEOUT_MS:
        logger.warning(
            "config.api_timeout_overridden",
            extra={"extra_data": {"timeout_ms": settings.API_TIMEOUT_MS, "default_ms": DEFAULT_TIMEOUT_MS}},
        )
    store = PersistentStore(settings.state_path)
    session = SessionContext(store)
    notifier = NotificationCenter()
    location = Location(href="/")

    router = Router(ROUTES)
    router.before_each(session_guard(session))

    location.on_reload(router.reset)
    location.on_reload(notifier.clear)

    gateway = RequestGateway(
        session,
        base_url=settings.API_BASE_URL,
        timeout_ms=settings.API_TIMEOUT_MS,
        notifier=notifier,
        location=location,
        login_path=settings.LOGIN_PATH,
        transport=transport,
    )
    return Console(
        settings=settings,
        session=session,
        locale=LocalePreference(store, default=settings.DEFAULT_LOCALE, fallback=settings.FALLBACK_LOCALE),
        notifier=notifier,
        location=location,
        router=router,
        gateway=gateway,
        templates=get_templates(settings.templates_dir),
    )


def create_app(
    settings: ConsoleSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    console = build_console(settings, transport=transport)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        try:
            yield
        finally:
            await console.gateway.aclose()

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.console = console

    app.add_middleware(NoStoreHeadersMiddleware)
    app.add_middleware(RequestIdMiddleware)

    # Login routes (no session required)
    from .routers import auth_ui as auth_ui_router

    app.include_router(auth_ui_router.router)

    # Console pages (session required via router dependency)
    from .routers import ui as ui_router

    app.include_router(ui_router.router)

    app.add_exception_handler(GuardRedirect, guard_redirect_handler)
    app.add_exception_handler(httpx.HTTPError, gateway_error_handler)
    return app


__all__ = ["build_console", "create_app"]
