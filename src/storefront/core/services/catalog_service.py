"""Product catalog operations behind the products controller."""

from dataclasses import dataclass
from pathlib import Path

from loguru import logger
from sqlmodel import Session

from src.storefront.core.errors import ProductNotFoundError
from src.storefront.core.models.product_params import ProductParams
from src.storefront.core.storage.image_storage import ImageStorage
from src.storefront.entities.product import FieldErrors, Product, ProductRepository


@dataclass(frozen=True)
class Saved:
    """The product passed validation and was persisted."""

    product: Product


@dataclass(frozen=True)
class Rejected:
    """Validation failed; ``product`` holds the submitted, unsaved values."""

    product: Product
    errors: FieldErrors


SaveResult = Saved | Rejected


class CatalogService:
    """Loads, validates, saves and destroys products.

    Saving returns a ``SaveResult`` instead of raising: a validation failure is
    routine control flow for a form, not an exceptional condition.
    """

    def __init__(self, session: Session, image_storage: ImageStorage) -> None:
        self._session = session
        self._products = ProductRepository(session)
        self._images = image_storage

    def list_products(self) -> list[Product]:
        return self._products.list_all()

    def find(self, product_id: str) -> Product:
        """Load a product by ID.

        Raises:
            ProductNotFoundError: no product has this ID.
        """
        product = self._products.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def build(self, params: ProductParams | None = None) -> Product:
        """Return a new, unsaved product with ``params`` applied."""
        product = Product()
        if params is not None:
            product.assign(params)
        return product

    def create(self, params: ProductParams) -> SaveResult:
        product = self.build(params)
        errors = product.validation_errors()
        if errors:
            logger.info("Product rejected on create: {}", sorted(errors))
            return Rejected(product=product, errors=errors)

        stored_key = self._store_pending_image(product)
        try:
            saved = self._products.create(product)
            self._session.commit()
        except Exception:
            self._session.rollback()
            if stored_key:
                self._images.delete(stored_key)
            raise

        logger.info("Created product {}", saved.id)
        return Saved(product=saved)

    def update(self, product: Product, params: ProductParams) -> SaveResult:
        """Apply ``params`` to a loaded product and persist it when valid.

        Only submitted attributes change. On rejection the stored row is left
        untouched and ``product`` carries the submitted values.
        """
        previous_key = product.featured_image_key
        product.assign(params)

        errors = product.validation_errors()
        if errors:
            logger.info("Product {} rejected on update: {}", product.id, sorted(errors))
            return Rejected(product=product, errors=errors)

        stored_key = self._store_pending_image(product)
        try:
            saved = self._products.update(product)
            self._session.commit()
        except Exception:
            self._session.rollback()
            if stored_key:
                self._images.delete(stored_key)
            raise

        if stored_key and previous_key:
            self._images.delete(previous_key)

        logger.info("Updated product {}", saved.id)
        return Saved(product=saved)

    def destroy(self, product: Product) -> None:
        self._products.delete(product.id)
        self._session.commit()

        if product.featured_image_key:
            self._images.delete(product.featured_image_key)
        logger.info("Destroyed product {}", product.id)

    def featured_image_path(self, product: Product) -> Path | None:
        if not product.featured_image_key:
            return None
        return self._images.path_for(product.featured_image_key)

    def _store_pending_image(self, product: Product) -> str | None:
        upload = product.pending_image
        if upload is None:
            return None
        key = self._images.save(upload.data, upload.extension)
        product.attach_image(key, upload)
        return key
