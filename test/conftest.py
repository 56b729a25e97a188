"""
Test Configuration and Fixtures

This module provides:
- Test environment variables (log directory, JWT secret)
- The session-scoped TestClient over the test app (in-memory repositories)
- Per-test cleanup of the in-memory collections
- Token fixtures for a guest and an admin

Architecture:
- Unit tests (test/**/unit/): Use AsyncMock repositories, never the HTTP client
- API tests (test/**/integration/): Use the TestClient fixture below
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks read these at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('JWT_SECRET', 'test_secret_key_for_bookmyevent_tests_only')
    os.environ.setdefault('MONGODB_DB_NAME', 'bookMyEvent_test')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.constant.route_constant import USER_LOGIN  # noqa: E402
from test.in_memory_repos import in_memory_repos  # noqa: E402
from test.test_constants import ADMIN_EMAIL, GUEST_EMAIL  # noqa: E402


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[Any, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clean_collections() -> Generator[None, None, None]:
    in_memory_repos.clear()
    yield
    in_memory_repos.clear()


# =============================================================================
# Auth Fixtures
# =============================================================================
def _login(client: TestClient, email: str) -> str:
    response = client.post(USER_LOGIN, json={'email': email, 'name': email.split('@')[0]})
    assert response.status_code == 200, response.text
    return response.json()['token']


@pytest.fixture
def guest_token(client: TestClient) -> str:
    return _login(client, GUEST_EMAIL)


@pytest.fixture
def admin_token(client: TestClient) -> str:
    token = _login(client, ADMIN_EMAIL)
    # Roles are never self-assigned; promote directly in the store
    in_memory_repos.user_repo.grant_admin(email=ADMIN_EMAIL)
    return token
