import pytest
from fastapi.testclient import TestClient

from user_api.config import Settings
from user_api.main import create_app
from user_api.services.user_store import CountingUserStore, UserStore
from user_api.store import get_user_store

# ============================================================================
# Test App Setup
# ============================================================================
# 1. Each test gets a fresh, empty store (no state leaks between tests)
# 2. The app's get_user_store dependency is overridden with that store
# 3. Override is set BEFORE TestClient() and cleared only after it exits


def _client_for(store: UserStore, variant: str):
    app = create_app(Settings(user_store_variant=variant))
    app.dependency_overrides[get_user_store] = lambda: store
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="store")
def store_fixture():
    """Empty store for the DTO variant"""
    return CountingUserStore()


@pytest.fixture(name="basic_store")
def basic_store_fixture():
    """Empty store for the basic variant"""
    return UserStore()


@pytest.fixture(name="client")
def client_fixture(store: CountingUserStore):
    """Test client for the DTO variant, backed by the store fixture"""
    yield from _client_for(store, "dto")


@pytest.fixture(name="basic_client")
def basic_client_fixture(basic_store: UserStore):
    """Test client for the basic variant, backed by the basic_store fixture"""
    yield from _client_for(basic_store, "basic")
