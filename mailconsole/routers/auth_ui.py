"""Login, logout and language switch. None of these require a session."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from ..deps.console import Console, get_console
from ..services import mailapi
from ..services.gateway import FALLBACK_MESSAGE

router = APIRouter()


@router.get("/login", response_class=HTMLResponse)
def login_page(request: Request, console: Console = Depends(get_console)):
    console.router.push(console.settings.LOGIN_PATH)
    return console.render(request, "login.html", {})


@router.post("/login")
async def login_submit(
    request: Request,
    password: str = Form(""),
    console: Console = Depends(get_console),
):
    # Wrong passwords come back 401 and are handled by the gateway like any
    # other rejected request.
    try:
        token = await mailapi.login(console.gateway, password)
    except ValidationError:
        console.notifier.error(FALLBACK_MESSAGE)
        return RedirectResponse(url=console.settings.LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)
    console.session.sign_in(token)
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/logout")
def logout(console: Console = Depends(get_console)):
    console.session.sign_out()
    return RedirectResponse(url=console.settings.LOGIN_PATH, status_code=status.HTTP_302_FOUND)


@router.post("/locale")
def switch_locale(
    locale: str = Form(...),
    next: str = Form("/"),
    console: Console = Depends(get_console),
):
    try:
        console.locale.set(locale)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    # Only same-site paths; anything else goes home.
    target = next if next.startswith("/") and not next.startswith("//") else "/"
    return RedirectResponse(url=target, status_code=status.HTTP_303_SEE_OTHER)
