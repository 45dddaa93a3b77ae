"""Console pages. Every route here sits behind the navigation guard."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Form, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from ..deps.console import Console, get_console
from ..deps.ui_auth import require_ui_session
from ..schemas.mail import AccountWrite
from ..services import mailapi

router = APIRouter(dependencies=[Depends(require_ui_session)])


def _back_to(path: str) -> RedirectResponse:
    return RedirectResponse(url=path, status_code=status.HTTP_303_SEE_OTHER)


def _required(console: Console, path: str) -> RedirectResponse:
    console.notifier.error(console.locale.translator().t("common.required"))
    return _back_to(path)


@router.get("/")
def index_page():
    # The guard resolves "/" to the domains page before this runs.
    return _back_to("/domains")


# ---- Domains

@router.get("/domains", response_class=HTMLResponse)
async def domains_page(request: Request, console: Console = Depends(get_console)):
    domains = await mailapi.list_domains(console.gateway)
    return console.render(request, "domains.html", {"domains": domains})


@router.post("/domains")
async def domain_create(name: str = Form(""), console: Console = Depends(get_console)):
    try:
        await mailapi.create_domain(console.gateway, name)
    except ValidationError:
        return _required(console, "/domains")
    console.notifier.success(console.locale.translator().t("domain.added"))
    return _back_to("/domains")


@router.post("/domains/{domain_id}/delete")
async def domain_delete(domain_id: int, console: Console = Depends(get_console)):
    await mailapi.delete_domain(console.gateway, domain_id)
    console.notifier.success(console.locale.translator().t("domain.deleted"))
    return _back_to("/domains")


# ---- Accounts (forwarding rules)

@router.get("/accounts", response_class=HTMLResponse)
async def accounts_page(request: Request, console: Console = Depends(get_console)):
    accounts = await mailapi.list_accounts(console.gateway)
    return console.render(request, "accounts.html", {"accounts": accounts})


@router.post("/accounts")
async def account_create(
    pattern: str = Form(""),
    forward_to: str = Form(""),
    description: str = Form(""),
    console: Console = Depends(get_console),
):
    try:
        data = AccountWrite(pattern=pattern.strip(), forward_to=forward_to.strip(), description=description.strip())
    except ValidationError:
        return _required(console, "/accounts")
    await mailapi.create_account(console.gateway, data)
    console.notifier.success(console.locale.translator().t("account.added"))
    return _back_to("/accounts")


@router.post("/accounts/{account_id}")
async def account_update(
    account_id: int,
    pattern: str = Form(""),
    forward_to: str = Form(""),
    description: str = Form(""),
    console: Console = Depends(get_console),
):
    try:
        data = AccountWrite(pattern=pattern.strip(), forward_to=forward_to.strip(), description=description.strip())
    except ValidationError:
        return _required(console, "/accounts")
    await mailapi.update_account(console.gateway, account_id, data)
    console.notifier.success(console.locale.translator().t("account.updated"))
    return _back_to("/accounts")


@router.post("/accounts/{account_id}/delete")
async def account_delete(account_id: int, console: Console = Depends(get_console)):
    await mailapi.delete_account(console.gateway, account_id)
    console.notifier.success(console.locale.translator().t("account.deleted"))
    return _back_to("/accounts")


# ---- Forwarding logs

@router.get("/logs", response_class=HTMLResponse)
async def logs_page(
    request: Request,
    page: int = Query(default=1, ge=1),
    console: Console = Depends(get_console),
):
    log_page = await mailapi.list_logs(console.gateway, page=page)
    return console.render(request, "logs.html", {"log_page": log_page})
