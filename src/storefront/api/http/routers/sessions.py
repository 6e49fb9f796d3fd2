"""Sign-in and sign-out."""

from fastapi import APIRouter, Depends, Form, Query, Request
from loguru import logger
from starlette.concurrency import run_in_threadpool
from starlette.responses import RedirectResponse, Response

from src.storefront.api.http.deps import (
    get_session_service,
    get_user_service,
    require_authentication,
    verify_csrf_token,
)
from src.storefront.api.http.templating import render
from src.storefront.core.i18n import t
from src.storefront.core.models.session import UserSession
from src.storefront.core.security import sanitize_return_url
from src.storefront.core.services import SessionService, UserService
from src.storefront.runtime.context import get_config

router = APIRouter(prefix="/session", tags=["session"])

AFTER_AUTHENTICATION_URL = "/products"


def _client_ip(request: Request) -> str | None:
    xff = request.headers.get("x-forwarded-for")
    if xff:
        return xff.split(",")[0].strip()
    return request.client.host if request.client else None


@router.get("/new", name="new_session")
def new_session(request: Request, return_to: str | None = Query(default=None)) -> Response:
    """Render the sign-in form."""
    return render(
        request,
        "sessions/new.html",
        {"return_to": sanitize_return_url(return_to, default=""), "alert": None},
    )


@router.post("", name="create_session")
async def create_session(
    request: Request,
    email_address: str = Form(default=""),
    password: str = Form(default=""),
    return_to: str | None = Form(default=None),
    users: UserService = Depends(get_user_service),
    sessions: SessionService = Depends(get_session_service),
) -> Response:
    """Authenticate by email address and password and start a session."""
    user = await run_in_threadpool(users.authenticate, email_address, password)
    if user is None:
        return render(
            request,
            "sessions/new.html",
            {
                "return_to": sanitize_return_url(return_to, default=""),
                "email_address": email_address,
                "alert": t("sessions.invalid_credentials"),
            },
            status_code=401,
        )

    user_session = await sessions.start_session(
        user, ip_address=_client_ip(request), user_agent=request.headers.get("user-agent")
    )

    config = get_config()
    response = RedirectResponse(
        url=sanitize_return_url(return_to, default=AFTER_AUTHENTICATION_URL),
        status_code=303,
    )
    response.set_cookie(
        key=config.security.session_cookie_name,
        value=user_session.id,
        max_age=config.app.session_max_age,
        httponly=True,
        secure=config.security.secure_cookies and config.app.environment == "production",
        samesite=config.security.cookie_samesite,
        path="/",
    )
    return response


@router.delete("", name="destroy_session", dependencies=[Depends(verify_csrf_token)])
async def destroy_session(
    user_session: UserSession = Depends(require_authentication),
    sessions: SessionService = Depends(get_session_service),
) -> Response:
    """Terminate the current session."""
    await sessions.terminate_session(user_session.id)
    logger.info("User {} signed out", user_session.user_id)

    response = RedirectResponse(url="/session/new", status_code=303)
    response.delete_cookie(get_config().security.session_cookie_name, path="/")
    return response
