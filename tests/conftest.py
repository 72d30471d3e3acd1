"""Root conftest — shared test configuration."""

import os
import tempfile

# Module-level planet_api.main.app is built from these on import
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault(
    "UPLOAD_DIR", os.path.join(tempfile.gettempdir(), "planet-api-test-uploads"),
)
os.environ.setdefault("LOG_FORMAT", "text")
