from __future__ import annotations

import logging
from typing import Callable, List

logger = logging.getLogger(__name__)


class Location:
    """Hard navigation target of the console.

    ``assign`` is the equivalent of a full page load: listeners registered
    with ``on_reload`` throw away in-memory state (router position, queued
    notifications) before the next page is served from ``href``.
    """

    def __init__(self, href: str = "/") -> None:
        self.href = href
        self.reloads = 0
        self._listeners: List[Callable[[str], None]] = []

    def on_reload(self, listener: Callable[[str], None]) -> None:
        self._listeners.append(listener)

    def assign(self, url: str) -> None:
        logger.info("location.assign", extra={"extra_data": {"href": url, "previous": self.href}})
        self.href = url
        self.reloads += 1
        for listener in list(self._listeners):
            listener(url)
