from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Literal

logger = logging.getLogger(__name__)

Level = Literal["success", "error"]


@dataclass(frozen=True)
class Notification:
    level: Level
    text: str


class NotificationCenter:
    """Transient messages shown once, on the next page the operator sees."""

    def __init__(self) -> None:
        self._pending: List[Notification] = []

    def error(self, text: str) -> None:
        logger.info("notify.error", extra={"extra_data": {"text": text}})
        self._pending.append(Notification("error", text))

    def success(self, text: str) -> None:
        self._pending.append(Notification("success", text))

    def drain(self) -> List[Notification]:
        pending, self._pending = self._pending, []
        return pending

    def clear(self, _href: str | None = None) -> None:
        self._pending.clear()

    def __len__(self) -> int:
        return len(self._pending)
