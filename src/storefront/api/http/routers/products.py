"""Products resource: list, show, new, create, edit, update and delete.

Listing, showing and downloading the featured image are public. Every other
action requires an authenticated session, and the state-changing ones also a
valid authenticity token.
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from starlette.responses import FileResponse, RedirectResponse, Response

from src.storefront.api.http.deps import (
    get_catalog_service,
    get_current_session,
    load_product,
    product_params,
    require_authentication,
    verify_csrf_token,
)
from src.storefront.api.http.templating import render
from src.storefront.core.models.product_params import ProductParams
from src.storefront.core.services import CatalogService, Saved
from src.storefront.entities.product import Product

router = APIRouter(prefix="/products", tags=["products"])

# Served inline; every other image type is sent as a download
INLINE_IMAGE_TYPES = frozenset({"image/png", "image/jpeg", "image/gif", "image/webp"})

authenticated = [Depends(require_authentication)]
authenticated_write = [Depends(require_authentication), Depends(verify_csrf_token)]


def _redirect_to(request: Request, route_name: str, **path_params: str) -> RedirectResponse:
    return RedirectResponse(
        url=request.app.url_path_for(route_name, **path_params), status_code=303
    )


@router.get("", name="list_products", dependencies=[Depends(get_current_session)])
def list_products(
    request: Request,
    catalog: CatalogService = Depends(get_catalog_service),
) -> Response:
    """List all products."""
    return render(request, "products/index.html", {"products": catalog.list_products()})


@router.get("/new", name="new_product", dependencies=authenticated)
def new_product(
    request: Request,
    catalog: CatalogService = Depends(get_catalog_service),
) -> Response:
    """Render the creation form for an empty product."""
    return render(request, "products/new.html", {"product": catalog.build(), "errors": {}})


@router.post("", name="create_product", dependencies=authenticated_write)
def create_product(
    request: Request,
    params: ProductParams = Depends(product_params),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Response:
    """Create a product, or redisplay the form with errors."""
    result = catalog.create(params)
    if isinstance(result, Saved):
        return _redirect_to(request, "show_product", product_id=result.product.id)

    return render(
        request,
        "products/new.html",
        {"product": result.product, "errors": result.errors},
        status_code=422,
    )


@router.get(
    "/{product_id}", name="show_product", dependencies=[Depends(get_current_session)]
)
def show_product(request: Request, product: Product = Depends(load_product)) -> Response:
    """Show a single product."""
    return render(request, "products/show.html", {"product": product})


@router.get("/{product_id}/edit", name="edit_product", dependencies=authenticated)
def edit_product(request: Request, product: Product = Depends(load_product)) -> Response:
    """Render the edit form for an existing product."""
    return render(request, "products/edit.html", {"product": product, "errors": {}})


@router.api_route(
    "/{product_id}",
    methods=["PATCH", "PUT"],
    name="update_product",
    dependencies=authenticated_write,
)
def update_product(
    request: Request,
    product: Product = Depends(load_product),
    params: ProductParams = Depends(product_params),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Response:
    """Update a product, or redisplay the form with the submitted values."""
    result = catalog.update(product, params)
    if isinstance(result, Saved):
        return _redirect_to(request, "show_product", product_id=result.product.id)

    return render(
        request,
        "products/edit.html",
        {"product": result.product, "errors": result.errors},
        status_code=422,
    )


@router.delete("/{product_id}", name="destroy_product", dependencies=authenticated_write)
def destroy_product(
    request: Request,
    product: Product = Depends(load_product),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Response:
    """Delete a product."""
    catalog.destroy(product)
    return _redirect_to(request, "list_products")


@router.get("/{product_id}/featured_image", name="product_featured_image")
def featured_image(
    product: Product = Depends(load_product),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Response:
    """Serve the stored featured image of a product."""
    path = catalog.featured_image_path(product)
    if path is None:
        raise HTTPException(status_code=404, detail="Featured image not found")

    content_type = product.featured_image_content_type
    return FileResponse(
        path,
        media_type=content_type,
        filename=product.featured_image_filename,
        content_disposition_type="inline" if content_type in INLINE_IMAGE_TYPES else "attachment",
        headers={"Content-Security-Policy": "sandbox"},
    )
