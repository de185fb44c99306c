"""Root conftest — shared test configuration."""

import os
import tempfile
from pathlib import Path

# Must run before ``app`` is imported: the engine and settings are module-level.
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite:///{Path(tempfile.gettempdir()) / 'record_store_test.db'}",
)
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-the-record-store-suite")
os.environ.setdefault("APP_ENV", "test")
