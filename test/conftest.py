import os

# Keep the suite on the in-memory store and never touch a database file.
os.environ["TASK_STORE"] = "memory"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from fastapi.testclient import TestClient

from backend_fastapi.main import create_app
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository


@pytest.fixture
def repository():
    return InMemoryTaskRepository()


@pytest.fixture
def api_client(repository):
    with TestClient(create_app(repository)) as client:
        yield client
