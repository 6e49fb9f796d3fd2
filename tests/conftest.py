"""Test configuration shared by unit and integration tests.

Environment variables are set before anything under ``src`` is imported, so the
configuration loaded from config.yaml points at an in-memory database and a
throwaway image directory.
"""

import os
import tempfile

os.environ["APP_ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["IMAGE_STORAGE_ROOT"] = tempfile.mkdtemp(prefix="storefront-images-")
os.environ["LOG_FILE"] = ""
os.environ.setdefault("LOG_LEVEL", "WARNING")

from tests.fixtures import *  # noqa: E402,F401,F403
