"""Core models exports."""

from .product_params import ImageUpload, ProductParams
from .session import UserSession

__all__ = ["ImageUpload", "ProductParams", "UserSession"]
