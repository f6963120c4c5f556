import pytest
from fastapi.testclient import TestClient

from tasks_api.main import create_app
from tasks_api.store import TaskStore


@pytest.fixture
def store():
    return TaskStore()


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
