"""
ProcessDesk - Test Configuration and Fixtures
"""
import os

import pytest
from fastapi.testclient import TestClient

# Set testing environment
os.environ["APP_ENV"] = "test"
os.environ["STORAGE_BACKEND"] = "memory"

from processdesk.config import Settings
from processdesk.main import create_app
from processdesk.storage.memory_storage import MemoryStorage
from processdesk.storage.sql_storage import SqlStorage


def make_storage(backend: str):
    if backend == "database":
        # in-memory SQLite, one StaticPool connection per storage
        return SqlStorage.from_url("sqlite://")
    return MemoryStorage()


@pytest.fixture
def settings() -> Settings:
    return Settings(app_env="test", storage_backend="memory")


@pytest.fixture(params=["memory", "database"])
def storage(request):
    """Fresh store for each test, once per backend"""
    store = make_storage(request.param)
    yield store
    store.close()


@pytest.fixture
def client(storage, settings):
    """Test client bound to the parametrized store"""
    app = create_app(settings=settings, storage=storage)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def project_data():
    return {
        "name": "X",
        "description": "Y",
        "status": "In Progress",
        "completion": 0,
        "dueDate": "2025-01-01",
    }


@pytest.fixture
def project(client, project_data) -> dict:
    response = client.post("/api/projects", json=project_data)
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def seeded_client(client):
    response = client.post("/api/init-db")
    assert response.status_code == 200
    return client
