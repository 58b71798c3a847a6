import os

import pytest

# Set test environment variables BEFORE any sendgrid_key imports
os.environ.setdefault("SENDGRID_API_KEY", "SG.test-admin-key")

from sendgrid_key.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
