"""Display strings for the console in English and Chinese.

The active locale is persisted under the ``locale`` key next to the session
token. A key missing from the active table is looked up in the fallback table
(English); a key missing everywhere renders as the key itself so a gap shows
up on screen instead of breaking the page.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..core.config import SUPPORTED_LOCALES
from ..core.session import PersistentStore
from . import en, zh

LOCALE_KEY = "locale"

MESSAGES: dict[str, Mapping[str, Any]] = {
    "en": en.MESSAGES,
    "zh": zh.MESSAGES,
}


def _lookup(table: Mapping[str, Any], key: str) -> str | None:
    node: Any = table
    for part in key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


class Translator:
    def __init__(
        self,
        locale: str,
        fallback: str = "en",
        messages: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> None:
        self.messages = messages if messages is not None else MESSAGES
        self.locale = locale
        self.fallback = fallback

    def t(self, key: str) -> str:
        for locale in (self.locale, self.fallback):
            value = _lookup(self.messages.get(locale, {}), key)
            if value is not None:
                return value
        return key

    __call__ = t


class LocalePreference:
    """The operator's chosen display language, persisted across restarts."""

    def __init__(self, store: PersistentStore, default: str = "zh", fallback: str = "en") -> None:
        self._store = store
        self.default = default
        self.fallback = fallback

    @property
    def current(self) -> str:
        value = self._store.get(LOCALE_KEY)
        return value if value in SUPPORTED_LOCALES else self.default

    def set(self, locale: str) -> None:
        locale = (locale or "").strip().lower()
        if locale not in SUPPORTED_LOCALES:
            raise ValueError(f"Unsupported locale: {locale!r}")
        self._store.set(LOCALE_KEY, locale)

    def translator(self) -> Translator:
        return Translator(self.current, fallback=self.fallback)


__all__ = ["LOCALE_KEY", "MESSAGES", "LocalePreference", "Translator"]
