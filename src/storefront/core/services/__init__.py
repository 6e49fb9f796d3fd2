"""Core services exports."""

from .catalog_service import CatalogService, Rejected, Saved, SaveResult
from .database.db_session import DbSessionService
from .session_service import SessionService
from .user_service import UserService

__all__ = [
    "CatalogService",
    "DbSessionService",
    "Rejected",
    "SaveResult",
    "Saved",
    "SessionService",
    "UserService",
]
