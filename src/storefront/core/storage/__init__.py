"""Storage backends for sessions and uploaded images."""

from .image_storage import ImageStorage
from .session_storage import InMemorySessionStorage, SessionStorage, get_session_storage

__all__ = [
    "ImageStorage",
    "InMemorySessionStorage",
    "SessionStorage",
    "get_session_storage",
]
