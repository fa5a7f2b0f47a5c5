"""Common test fixtures for the application."""

import os
import tempfile
from pathlib import Path

_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="scheduler_admin_"))

os.environ.setdefault("ENV", "testing")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR / 'app.db'}"
os.environ["CLEAR_DB_ON_RESTART"] = "true"
os.environ["SEED_DB_ON_START"] = "true"
os.environ.pop("DISPLAY_TIMEZONE", None)

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from scheduler_admin.app import app  # noqa: E402


@pytest.fixture(name="client")
def client_fixture() -> Generator[TestClient]:
    """Create a test client running the app lifespan.

    The lifespan recreates and seeds the action table, so every test starts
    with the sample actions scheduled relative to the current time.

    Returns:
        TestClient: Configured FastAPI test client.
    """
    with TestClient(app, base_url="http://testserver") as client:  # NOSONAR
        yield client

    app.dependency_overrides.clear()
