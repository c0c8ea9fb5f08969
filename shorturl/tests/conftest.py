import logging

import pytest
from fastapi.testclient import TestClient

from shorturl.main import app
from shorturl.core.logging_config import REDIRECT_LOGGER
from shorturl.db.Connection.memory import URLStore, get_store
from shorturl.db.seed import SEED_ENTRIES


@pytest.fixture
def store():
    """Creates a freshly seeded store for each test."""
    return URLStore(seed=SEED_ENTRIES)


@pytest.fixture
def client(store):
    """Creates a test client with overridden store dependency."""
    def override_get_store():
        return store

    app.dependency_overrides[get_store] = override_get_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seed_pairs():
    """Provides the seed entries as JSON-shaped dicts."""
    return [
        {"id": "ads45s", "url": "https://ballerina.io"},
        {"id": "sdf45s", "url": "https://ballerina.io/learn/api-docs/ballerina/http.html"},
        {"id": "xyz123", "url": "https://example.com"},
    ]


@pytest.fixture
def redirect_messages(caplog):
    """Collects lines written to the redirect log sink, which does not propagate."""
    sink = logging.getLogger(REDIRECT_LOGGER)
    sink.addHandler(caplog.handler)
    try:
        yield lambda: [r.getMessage() for r in caplog.records if r.name == REDIRECT_LOGGER]
    finally:
        sink.removeHandler(caplog.handler)
