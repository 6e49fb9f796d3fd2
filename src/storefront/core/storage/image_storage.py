"""Filesystem storage for featured images.

Each stored image is addressed by a key of the form ``<uuid4 hex><extension>``;
keys never contain path separators, so a key always resolves inside the root.
"""

import re
import uuid
from pathlib import Path

from loguru import logger

from src.storefront.runtime.context import get_config

_KEY_PATTERN = re.compile(r"^[0-9a-f]{32}(\.[a-z0-9]{1,10})?$")


class ImageStorage:
    """Stores, reads and deletes image blobs under a root directory."""

    def __init__(self, root: str | Path | None = None):
        """
        Args:
            root: Storage directory (defaults to ``storage.root`` from config)
        """
        self.root = Path(root or get_config().storage.root)
        self.root.mkdir(parents=True, exist_ok=True)

    def save(self, data: bytes, extension: str = "") -> str:
        """Write ``data`` to a new blob and return its key."""
        ext = extension.lower()
        if ext and not ext.startswith("."):
            ext = f".{ext}"
        if not re.fullmatch(r"(\.[a-z0-9]{1,10})?", ext):
            ext = ""

        key = f"{uuid.uuid4().hex}{ext}"
        (self.root / key).write_bytes(data)
        logger.debug("Stored image {} ({} bytes)", key, len(data))
        return key

    def path_for(self, key: str) -> Path | None:
        """Return the path of an existing blob, or None when absent or malformed."""
        if not _KEY_PATTERN.match(key):
            return None
        path = self.root / key
        return path if path.is_file() else None

    def delete(self, key: str) -> bool:
        """Delete a blob; returns False when it did not exist."""
        path = self.path_for(key)
        if path is None:
            return False
        path.unlink()
        logger.debug("Deleted image {}", key)
        return True
