"""Run every request under the locale it asks for.

The active locale is the ``locale`` query parameter when present, otherwise
the configured default. It stays active through rendering and redirects and is
restored once the response is produced, whether or not the handler raised.
"""

from fastapi import Request
from loguru import logger
from starlette.responses import Response

from src.storefront.api.http.templating import render
from src.storefront.core.errors import InvalidLocaleError
from src.storefront.core.i18n import resolve_locale, t, use_locale

LOCALE_PARAM = "locale"


async def switch_locale(request: Request, call_next) -> Response:
    try:
        locale = resolve_locale(request.query_params.get(LOCALE_PARAM))
    except InvalidLocaleError as exc:
        logger.info("Rejected request for unavailable locale {}", exc.locale)
        return render(
            request,
            "errors/error.html",
            {
                "title": t("errors.bad_request.title"),
                "message": t("errors.invalid_locale", locale=exc.locale),
            },
            status_code=exc.status_code,
        )

    with use_locale(locale):
        response = await call_next(request)
        response.headers.setdefault("Content-Language", locale)
        return response
