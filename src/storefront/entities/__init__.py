"""Entities module with entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model with business logic
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .product import Product, ProductRepository, ProductTable
from .user import User, UserRepository, UserTable

__all__ = [
    "Product",
    "ProductRepository",
    "ProductTable",
    "User",
    "UserRepository",
    "UserTable",
]
