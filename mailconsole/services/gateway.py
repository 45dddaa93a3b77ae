"""The one HTTP client every console view uses to reach the backend API.

``RequestGateway`` owns a single ``httpx.AsyncClient`` bound to the API root
with a fixed 5 second timeout. The timeout bounds the whole exchange, from
connecting to the last byte of the body, as well as each phase of it. Around
every call it:

* attaches ``Authorization: Bearer <token>`` when the session holds a token
  (``SessionBearerAuth``);
* hands back only the decoded JSON payload of a successful response;
* on failure, evicts the token and hard-redirects to the login page when the
  backend answered 401, queues one notification with the backend's ``error``
  text (or ``FALLBACK_MESSAGE``) and re-raises the original exception so the
  calling view can add its own handling.

Nothing is retried. Concurrent calls are independent of each other: if two of
them come back 401 the token is cleared and the redirect issued twice, which
is redundant but harmless.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Generator, Mapping

import httpx

from ..core.errors import extract_error_message
from ..core.session import SessionContext
from ..middlewares import request_id_ctx_var
from ..navigation.location import Location
from .notifications import NotificationCenter

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Request Failed"
DEFAULT_TIMEOUT_MS = 5000


class SessionBearerAuth(httpx.Auth):
    """Read the session token at send time and attach it as a bearer header."""

    def __init__(self, session: SessionContext) -> None:
        self.session = session

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        token = self.session.token
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        request_id = request_id_ctx_var.get()
        if request_id:
            request.headers.setdefault("X-Request-ID", request_id)
        yield request


def _payload(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class RequestGateway:
    def __init__(
        self,
        session: SessionContext,
        *,
        base_url: str,
        notifier: NotificationCenter,
        location: Location,
        login_path: str = "/login",
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.session = session
        self.notifier = notifier
        self.location = location
        self.login_path = login_path
        self.timeout_ms = timeout_ms
        kwargs: dict[str, Any] = {
            "base_url": base_url.rstrip("/") + "/",
            "timeout": httpx.Timeout(timeout_ms / 1000.0),
            "auth": SessionBearerAuth(session),
        }
        if transport is not None:
            kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**kwargs)

    async def send(
        self,
        method: str,
        path: str,
        body: Any | None = None,
        *,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Issue one request and return the payload of a successful response."""

        request = self._client.build_request(method.upper(), path.lstrip("/"), json=body, params=params)
        try:
            response = await self._send_within_deadline(request)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            self._handle_failure(method.upper(), path, exc)
            raise
        return _payload(response)

    async def _send_within_deadline(self, request: httpx.Request) -> httpx.Response:
        # httpx.Timeout only bounds each phase; this bounds the whole exchange.
        try:
            return await asyncio.wait_for(self._client.send(request), self.timeout_ms / 1000.0)
        except asyncio.TimeoutError as exc:
            raise httpx.TimeoutException(
                f"no complete response within {self.timeout_ms} ms", request=request
            ) from exc

    async def get(self, path: str, *, params: Mapping[str, Any] | None = None) -> Any:
        return await self.send("GET", path, params=params)

    async def post(self, path: str, body: Any | None = None) -> Any:
        return await self.send("POST", path, body)

    async def put(self, path: str, body: Any | None = None) -> Any:
        return await self.send("PUT", path, body)

    async def delete(self, path: str) -> Any:
        return await self.send("DELETE", path)

    def _handle_failure(self, method: str, path: str, exc: httpx.HTTPError) -> None:
        response = exc.response if isinstance(exc, httpx.HTTPStatusError) else None
        status = response.status_code if response is not None else None
        logger.warning(
            "gateway.request_failed",
            extra={
                "extra_data": {
                    "method": method,
                    "path": path,
                    "status": status,
                    "error_type": type(exc).__name__,
                }
            },
        )
        if status == httpx.codes.UNAUTHORIZED:
            self.session.expire()
            self.location.assign(self.login_path)
        payload = _payload(response) if response is not None else None
        self.notifier.error(extract_error_message(payload, FALLBACK_MESSAGE))

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "RequestGateway":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
