"""Product database table model."""

from sqlmodel import Field

from src.storefront.entities._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "products"

    name: str = Field(nullable=False)
    description: str | None = Field(default=None)
    featured_image_key: str | None = Field(default=None)
    featured_image_filename: str | None = Field(default=None)
    featured_image_content_type: str | None = Field(default=None)
