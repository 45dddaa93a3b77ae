"""Backend calls made by the console views.

Each function goes through the shared ``RequestGateway``; failures have
already been notified by the time they reach the caller.
"""

from __future__ import annotations

from typing import List

from ..schemas.mail import Account, AccountWrite, Domain, DomainCreate, LogPage, LoginResult
from .gateway import RequestGateway

DEFAULT_LOG_PAGE_SIZE = 20


async def login(gateway: RequestGateway, password: str) -> str:
    payload = await gateway.post("/login", {"password": password})
    return LoginResult.model_validate(payload).token


async def list_domains(gateway: RequestGateway) -> List[Domain]:
    payload = await gateway.get("/domains")
    return [Domain.model_validate(item) for item in payload or []]


async def create_domain(gateway: RequestGateway, name: str) -> Domain:
    data = DomainCreate(name=name.strip())
    payload = await gateway.post("/domains", data.model_dump())
    return Domain.model_validate(payload)


async def delete_domain(gateway: RequestGateway, domain_id: int) -> None:
    await gateway.delete(f"/domains/{domain_id}")


async def list_accounts(gateway: RequestGateway) -> List[Account]:
    payload = await gateway.get("/accounts")
    return [Account.model_validate(item) for item in payload or []]


async def create_account(gateway: RequestGateway, data: AccountWrite) -> Account:
    payload = await gateway.post("/accounts", data.model_dump())
    return Account.model_validate(payload)


async def update_account(gateway: RequestGateway, account_id: int, data: AccountWrite) -> Account:
    payload = await gateway.put(f"/accounts/{account_id}", data.model_dump())
    return Account.model_validate(payload)


async def delete_account(gateway: RequestGateway, account_id: int) -> None:
    await gateway.delete(f"/accounts/{account_id}")


async def list_logs(gateway: RequestGateway, page: int = 1, page_size: int = DEFAULT_LOG_PAGE_SIZE) -> LogPage:
    page = max(1, page)
    payload = await gateway.get("/logs", params={"page": page, "pageSize": page_size}) or {}
    return LogPage.model_validate({**payload, "page_size": page_size})
