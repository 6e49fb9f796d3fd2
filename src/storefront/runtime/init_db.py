"""Create the application's tables."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

# Import tables so they register with the metadata
from src.storefront.entities.product import ProductTable  # noqa: F401
from src.storefront.entities.user import UserTable  # noqa: F401


def init_db(engine: Engine) -> None:
    """Create every registered table that does not exist yet."""
    SQLModel.metadata.create_all(engine)
    logger.info("Database tables ensured: {}", sorted(SQLModel.metadata.tables))
