"""Entity: Product."""

from typing import Any

from pydantic import Field, PrivateAttr

from src.storefront.core.models.product_params import ImageUpload, ProductParams
from src.storefront.entities._base import Entity

FieldErrors = dict[str, list[str]]


class Product(Entity):
    """Product entity representing an item in the catalog.

    This is the domain model that contains business logic and validation.
    It inherits from Entity to get auto-generated UUID identifiers.

    Validation does not raise: ``validation_errors`` reports problems as
    message keys per field, so an invalid candidate can be redisplayed with
    exactly the values the user submitted.
    """

    name: str | None = Field(default=None, description="Product name")
    description: str | None = Field(default=None, description="Product description")
    featured_image_key: str | None = Field(
        default=None, description="Storage key of the featured image"
    )
    featured_image_filename: str | None = Field(
        default=None, description="Original filename of the featured image"
    )
    featured_image_content_type: str | None = Field(
        default=None, description="Content type of the featured image"
    )

    _pending_image: ImageUpload | None = PrivateAttr(default=None)

    @property
    def has_featured_image(self) -> bool:
        return self.featured_image_key is not None

    @property
    def pending_image(self) -> ImageUpload | None:
        """Upload assigned but not yet written to storage."""
        return self._pending_image

    def assign(self, params: ProductParams) -> None:
        """Apply the submitted whitelisted attributes to this product."""
        for field, value in params.attributes().items():
            setattr(self, field, value)
        if params.featured_image is not None:
            self._pending_image = params.featured_image

    def attach_image(self, key: str, upload: ImageUpload) -> None:
        self.featured_image_key = key
        self.featured_image_filename = upload.filename
        self.featured_image_content_type = upload.content_type
        self._pending_image = None

    def validation_errors(self) -> FieldErrors:
        errors: FieldErrors = {}
        if not self.name or not self.name.strip():
            errors.setdefault("name", []).append("errors.blank")
        if self._pending_image is not None and not self._pending_image.is_image:
            errors.setdefault("featured_image", []).append("errors.invalid_content_type")
        return errors

    def is_valid(self) -> bool:
        return not self.validation_errors()

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
            and self.featured_image_key == other.featured_image_key
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.description,
            self.featured_image_key,
        ))
