"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager
from urllib.parse import urlencode

from fastapi import FastAPI, Request
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, RedirectResponse, Response

from src.storefront.api.http.app_data import ApplicationDependencies
from src.storefront.api.http.middleware.locale import switch_locale
from src.storefront.api.http.middleware.method_override import MethodOverrideMiddleware
from src.storefront.api.http.routers import health, products, sessions
from src.storefront.api.http.templating import render
from src.storefront.api.utils.app_startup import configure_logging
from src.storefront.core.errors import (
    AuthenticationRequired,
    CsrfTokenError,
    ParameterMissingError,
    ProductNotFoundError,
    StorefrontError,
)
from src.storefront.core.i18n import t
from src.storefront.core.services import DbSessionService, SessionService
from src.storefront.core.storage import ImageStorage, get_session_storage
from src.storefront.runtime.context import get_config
from src.storefront.runtime.init_db import init_db

# Initialize logging
configure_logging()


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        # HSTS only in prod
        if get_config().app.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        return response


# --- Lifecycle hooks ---
async def startup() -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    database_service = DbSessionService()
    init_db(database_service.engine)

    session_storage = get_session_storage()
    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
        session_storage=session_storage,
        session_service=SessionService(session_storage),
        image_storage=ImageStorage(),
    )


async def shutdown() -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies = app.state.app_dependencies
    await app_dependencies.session_service.purge_expired()
    app_dependencies.database_service.dispose()


# --- FastAPI app setup ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    try:
        yield
    finally:
        await shutdown()


app = FastAPI(
    title="Storefront",
    lifespan=lifespan,
    docs_url=None if get_config().app.environment == "production" else "/docs",
    redoc_url=None if get_config().app.environment == "production" else "/redoc",
)

# expose startup for tests
__all__ = ["app", "startup", "shutdown"]


# --- Middleware, innermost first ---
app.middleware("http")(switch_locale)
app.add_middleware(MethodOverrideMiddleware)
app.add_middleware(SecurityHeadersMiddleware)


# --- Request logging middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
        "user_agent": request.headers.get("user-agent", "unknown"),
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


# --- Error handlers ---
@app.exception_handler(ProductNotFoundError)
async def product_not_found(request: Request, exc: ProductNotFoundError) -> Response:
    logger.info("Product {} not found", exc.product_id)
    return render(
        request,
        "errors/error.html",
        {
            "title": t("errors.not_found.title"),
            "message": t("errors.not_found.message"),
        },
        status_code=exc.status_code,
    )


@app.exception_handler(AuthenticationRequired)
async def authentication_required(request: Request, exc: AuthenticationRequired) -> Response:
    query = urlencode({"return_to": exc.return_to})
    return RedirectResponse(url=f"/session/new?{query}", status_code=303)


@app.exception_handler(StorefrontError)
async def storefront_error(request: Request, exc: StorefrontError) -> Response:
    if isinstance(exc, CsrfTokenError):
        title, message = t("errors.forbidden.title"), t("errors.forbidden.message")
    elif isinstance(exc, ParameterMissingError):
        title = t("errors.bad_request.title")
        message = t("errors.parameter_missing", param=exc.param)
    else:
        title, message = t("errors.bad_request.title"), str(exc)

    logger.bind(error_type=type(exc).__name__).warning("Request rejected: {}", exc)
    return render(
        request,
        "errors/error.html",
        {"title": title, "message": message},
        status_code=exc.status_code,
    )


# --- Router registration ---
app.include_router(health.router)
app.include_router(products.router)
app.include_router(sessions.router)


@app.get("/", include_in_schema=False)
async def root() -> RedirectResponse:
    return RedirectResponse(url="/products", status_code=303)
