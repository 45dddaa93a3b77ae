from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Domain(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DomainCreate(BaseModel):
    name: str = Field(..., min_length=1)


class Account(BaseModel):
    """A forwarding rule: mail whose recipient matches ``pattern`` goes to ``forward_to``."""

    model_config = ConfigDict(extra="ignore")

    id: int
    pattern: str
    forward_to: str
    description: str = ""
    hit_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AccountWrite(BaseModel):
    pattern: str = Field(..., min_length=1)
    forward_to: str = Field(..., min_length=1)
    description: str = ""


class LogEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    from_: str = Field("", alias="from")
    to: str = ""
    subject: str = ""
    status: str = ""
    error: str = ""
    client_ip: str = ""
    created_at: Optional[datetime] = None


class LogPage(BaseModel):
    data: List[LogEntry] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = 20

    @property
    def pages(self) -> int:
        if self.page_size <= 0:
            return 1
        return max(1, -(-self.total // self.page_size))

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.pages


class LoginResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    token: str = Field(..., min_length=1)
