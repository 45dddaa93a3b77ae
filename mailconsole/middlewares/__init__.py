from __future__ import annotations

from .request_id import RequestIdMiddleware, request_id_ctx_var
from .security_headers import NoStoreHeadersMiddleware

__all__ = [
    "RequestIdMiddleware",
    "NoStoreHeadersMiddleware",
    "request_id_ctx_var",
]
