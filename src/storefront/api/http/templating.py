"""Jinja2 rendering bound to the active locale and the current session."""

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from src.storefront.core.i18n import available_locales, current_locale, t
from src.storefront.core.security import generate_csrf_token
from src.storefront.runtime.context import get_config

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals.update(
    t=t,
    current_locale=current_locale,
    available_locales=available_locales,
)


def render(
    request: Request,
    name: str,
    context: dict[str, Any] | None = None,
    status_code: int = 200,
) -> Response:
    """Render ``name`` with the session and CSRF token exposed to the template."""
    user_session = getattr(request.state, "user_session", None)
    page: dict[str, Any] = {
        "user_session": user_session,
        "csrf_field": get_config().security.csrf_form_field,
        "csrf_token": generate_csrf_token(user_session.id) if user_session else None,
    }
    page.update(context or {})
    return templates.TemplateResponse(request, name, page, status_code=status_code)
