from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..core.config import ConsoleSettings
from ..core.session import SessionContext
from ..i18n import LocalePreference
from ..navigation import Location, Router
from ..services.gateway import RequestGateway
from ..services.notifications import NotificationCenter


@dataclass
class Console:
    """Everything a page handler needs, wired once per console process."""

    settings: ConsoleSettings
    session: SessionContext
    locale: LocalePreference
    notifier: NotificationCenter
    location: Location
    router: Router
    gateway: RequestGateway
    templates: Jinja2Templates

    def render(
        self,
        request: Request,
        template: str,
        context: Mapping[str, Any],
        status_code: int = 200,
    ):
        translator = self.locale.translator()
        payload = {
            "request": request,
            "t": translator.t,
            "locale": translator.locale,
            "authenticated": self.session.is_authenticated,
            "current_route": self.router.current,
            "notifications": self.notifier.drain(),
            "app_name": self.settings.APP_NAME,
            **context,
        }
        return self.templates.TemplateResponse(request, template, payload, status_code=status_code)


def get_console(request: Request) -> Console:
    return request.app.state.console
