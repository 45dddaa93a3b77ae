"""Session credential storage for the console.

The console holds at most one live bearer token. It is kept in a small JSON
file under ``DATA_DIR`` so a restart of the console does not log the operator
out, much like a browser keeps ``localStorage`` between visits.

``SessionContext`` is the only object that touches the ``token`` key. Both the
request gateway and the navigation guard receive it explicitly.
"""

from __future__ import annotations

import enum
import json
import logging
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"


class PersistentStore:
    """String key/value store persisted as one JSON document."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._data: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable state file %s", self.path)
            return {}
        if not isinstance(raw, dict):
            return {}
        return {str(k): str(v) for k, v in raw.items() if v is not None}

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._data, indent=2, ensure_ascii=False), encoding="utf-8")

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self._save()

    def remove(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self._save()


class SessionState(str, enum.Enum):
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


class SessionContext:
    """Explicit handle on the single session credential.

    Transitions:

    * ``sign_in(token)``  -> AUTHENTICATED (login view)
    * ``expire()``        -> UNAUTHENTICATED (backend answered 401)
    * ``sign_out()``      -> UNAUTHENTICATED (operator logged out)

    Presence of a token is the whole test for "authenticated"; the token is
    never inspected for expiry locally. A rejected request is the only way an
    expired token is discovered.
    """

    def __init__(self, store: PersistentStore) -> None:
        self._store = store

    @property
    def token(self) -> str | None:
        return self._store.get(TOKEN_KEY) or None

    @property
    def state(self) -> SessionState:
        return SessionState.AUTHENTICATED if self.token else SessionState.UNAUTHENTICATED

    @property
    def is_authenticated(self) -> bool:
        return self.state is SessionState.AUTHENTICATED

    def sign_in(self, token: str) -> None:
        token = (token or "").strip()
        if not token:
            raise ValueError("token must be a non-empty string")
        self._transition(reason="sign_in", token=token)

    def expire(self) -> None:
        self._transition(reason="expired", token=None)

    def sign_out(self) -> None:
        self._transition(reason="sign_out", token=None)

    def _transition(self, *, reason: str, token: str | None) -> None:
        old = self.state
        if token is None:
            self._store.remove(TOKEN_KEY)
        else:
            self._store.set(TOKEN_KEY, token)
        new = self.state
        logger.info(
            "session.%s",
            reason,
            extra={"extra_data": {"from_state": old.value, "to_state": new.value}},
        )
