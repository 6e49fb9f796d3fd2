"""Entity package: User."""

from .entity import User, normalize_email
from .repository import UserRepository
from .table import UserTable

__all__ = ["User", "UserRepository", "UserTable", "normalize_email"]
