"""
Pytest fixtures: in-memory stand-ins for Supabase Auth and the Supabase tables
"""

import pytest
from typing import Any, Dict, List, Optional
from fastapi.testclient import TestClient

from signup_api.config import Settings
from signup_api.core.errors import AuthProviderError, PersistenceError
from signup_api.database.supabase_client import SupabaseClients


class FakeAuthProvider:
    """Records calls; hands out identities in order"""

    def __init__(self, identities: Optional[List[str]] = None):
        self.identities = list(identities or ["U1"])
        self.sign_up_calls: List[Dict[str, Any]] = []
        self.delete_calls: List[str] = []
        self.sign_up_error: Optional[AuthProviderError] = None
        self.delete_error: Optional[Exception] = None

    def sign_up(self, email: str, password: str, metadata: Dict[str, Any]) -> str:
        self.sign_up_calls.append({"email": email, "password": password, "metadata": metadata})
        if self.sign_up_error:
            raise self.sign_up_error
        return self.identities.pop(0)

    def delete_user(self, identity: str) -> None:
        self.delete_calls.append(identity)
        if self.delete_error:
            raise self.delete_error


class FakeDatastore:
    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.insert_calls: List[tuple] = []
        self.select_calls: List[tuple] = []
        self.insert_error: Optional[PersistenceError] = None
        self.select_error: Optional[PersistenceError] = None

    def insert(self, table: str, row: Dict[str, Any]) -> List[Dict[str, Any]]:
        self.insert_calls.append((table, row))
        if self.insert_error:
            raise self.insert_error
        self.tables.setdefault(table, []).append(row)
        return [row]

    def select(self, table: str, filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        self.select_calls.append((table, filters))
        if self.select_error:
            raise self.select_error
        return [
            row for row in self.tables.get(table, [])
            if all(row.get(k) == v for k, v in filters.items())
        ]


@pytest.fixture(autouse=True)
def reset_supabase_clients():
    """Drop cached Supabase clients so no test sees another test's client"""
    SupabaseClients.reset()
    yield
    SupabaseClients.reset()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, environment="development", supabase_url="", supabase_key="")


@pytest.fixture
def production_settings() -> Settings:
    return Settings(_env_file=None, environment="production", supabase_url="", supabase_key="")


@pytest.fixture
def fake_auth() -> FakeAuthProvider:
    return FakeAuthProvider()


@pytest.fixture
def fake_datastore() -> FakeDatastore:
    return FakeDatastore()


@pytest.fixture
def client(fake_auth, fake_datastore, test_settings):
    """TestClient with Supabase replaced by the fakes"""
    from signup_api.core.dependencies import get_auth_provider, get_datastore, get_settings
    from signup_api.main import app

    app.dependency_overrides[get_auth_provider] = lambda: fake_auth
    app.dependency_overrides[get_datastore] = lambda: fake_datastore
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
