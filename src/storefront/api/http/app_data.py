from dataclasses import dataclass

from src.storefront.core.services import DbSessionService, SessionService
from src.storefront.core.storage import ImageStorage, SessionStorage


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    session_storage: SessionStorage
    session_service: SessionService
    image_storage: ImageStorage
