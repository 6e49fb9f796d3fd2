"""Entity package: Product."""

from .entity import FieldErrors, Product
from .repository import ProductRepository
from .table import ProductTable

__all__ = ["FieldErrors", "Product", "ProductRepository", "ProductTable"]
