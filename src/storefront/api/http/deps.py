"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.storefront.api.http.app_data import ApplicationDependencies
from src.storefront.core.errors import AuthenticationRequired, CsrfTokenError
from src.storefront.core.models.product_params import ProductParams
from src.storefront.core.models.session import UserSession
from src.storefront.core.security import validate_csrf_token
from src.storefront.core.services import CatalogService, SessionService, UserService
from src.storefront.core.storage import ImageStorage
from src.storefront.entities.product import Product
from src.storefront.runtime.context import get_config


def _app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a database session that is closed when the request finishes."""
    session = _app_dependencies(request).database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_image_storage(request: Request) -> ImageStorage:
    """Get the featured image storage instance."""
    return _app_dependencies(request).image_storage


def get_session_service(request: Request) -> SessionService:
    """Get the user session service instance."""
    return _app_dependencies(request).session_service


def get_catalog_service(
    db: Session = Depends(get_db_session),
    image_storage: ImageStorage = Depends(get_image_storage),
) -> CatalogService:
    return CatalogService(db, image_storage)


def get_user_service(db: Session = Depends(get_db_session)) -> UserService:
    return UserService(db)


async def get_current_session(
    request: Request,
    session_service: SessionService = Depends(get_session_service),
) -> UserSession | None:
    """Resume the session named by the session cookie, if any.

    The result is also stored on ``request.state`` so templates can show it.
    """
    cookie_name = get_config().security.session_cookie_name
    user_session = await session_service.resume_session(request.cookies.get(cookie_name))
    request.state.user_session = user_session
    return user_session


def require_authentication(
    request: Request,
    user_session: UserSession | None = Depends(get_current_session),
) -> UserSession:
    """Reject requests without an authenticated session."""
    if user_session is None:
        return_to = request.url.path
        if request.method == "GET" and request.url.query:
            return_to = f"{return_to}?{request.url.query}"
        raise AuthenticationRequired(return_to=return_to)
    return user_session


async def verify_csrf_token(
    request: Request,
    user_session: UserSession = Depends(require_authentication),
) -> None:
    """Require a valid authenticity token on state-changing requests."""
    security = get_config().security
    if not security.csrf_protection:
        return

    token = request.headers.get(security.csrf_header_name)
    if token is None:
        form = await request.form()
        submitted = form.get(security.csrf_form_field)
        token = submitted if isinstance(submitted, str) else None

    if not validate_csrf_token(
        user_session.id, token, max_age_hours=security.csrf_token_max_age_hours
    ):
        raise CsrfTokenError("Invalid authenticity token")


def load_product(
    product_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
) -> Product:
    """Resolve the ``{product_id}`` path parameter to a product.

    Raises:
        ProductNotFoundError: no product has this ID.
    """
    return catalog.find(product_id)


async def product_params(request: Request) -> ProductParams:
    """Read the whitelisted ``product[...]`` fields from the submitted form."""
    return await ProductParams.from_form(await request.form())
