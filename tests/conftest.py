"""Root pytest configuration.

Test Structure:
    tests/
    └── unit/
        ├── dinely_auth/       # Token and password services
        ├── domain/            # User aggregate, value objects, events
        ├── application/       # Commands and queries against mocked repos
        ├── infrastructure/    # SQLAlchemy repository, SMTP email service
        └── presentation/      # FastAPI routes via TestClient

Required settings are provided here so importing the application never
depends on a developer's local config/.env.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Must be set before anything imports the FastAPI app
os.environ.setdefault(
    "JWT_SECRET_KEY",
    "test-secret-key-that-is-at-least-32-characters-long",
)
os.environ.setdefault("POSTGRES_PASSWORD", "test-password")
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SMTP_ENABLED", "false")

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development); OS values win
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")

from dinely_config import clear_settings_cache  # NOQA: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that verify database/persistence behavior",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Every test starts from settings freshly read from the environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()
