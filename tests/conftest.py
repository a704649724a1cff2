import pytest

from app import create_app
from fakes import InMemoryDocumentStore


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def make_client(store):
    def _make(**config):
        settings = {
            "EXECUTION_MODE": "production",
            "VIEWS_ATOMIC_INCREMENT": False,
        }
        settings.update(config)
        return create_app(config=settings, store=store).test_client()

    return _make


@pytest.fixture
def client(make_client):
    return make_client()
