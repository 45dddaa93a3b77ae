"""Jinja2 environment used by every console page."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

from fastapi.templating import Jinja2Templates


def _to_dt(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str) and value:
        try:
            dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    # Backend timestamps are UTC; show them in the console host's zone.
    return dt.astimezone() if dt.tzinfo else dt


def _fmt_dt(value: Any, fmt: str = "%Y-%m-%d %H:%M:%S") -> str:
    dt = _to_dt(value)
    return dt.strftime(fmt) if dt else ""


def _fmt_date(value: Any, fmt: str = "%Y-%m-%d") -> str:
    dt = _to_dt(value)
    return dt.strftime(fmt) if dt else ""


def get_templates(directory: Path) -> Jinja2Templates:
    """Create a ``Jinja2Templates`` instance with the console's filters registered."""

    templates = Jinja2Templates(directory=str(directory))
    templates.env.filters["fmt_dt"] = _fmt_dt
    templates.env.filters["fmt_date"] = _fmt_date
    return templates
