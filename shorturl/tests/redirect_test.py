import logging
import re

import pytest

from shorturl.main import app


@pytest.mark.parametrize("short_id, location", [
    ("xyz123", "https://example.com"),
    ("ads45s", "https://ballerina.io"),
    ("sdf45s", "https://ballerina.io/learn/api-docs/ballerina/http.html"),
])
def test_redirect_seed(client, short_id, location):
    response = client.get(f"/{short_id}", follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == location
    assert response.content == b""


def test_redirect_after_create(client):
    create_response = client.post("/api/addURL", json={"url": "example.com"})
    short_id = create_response.json()["id"]

    response = client.get(f"/{short_id}", follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == "http://example.com"


def test_redirect_not_found(client):
    response = client.get("/unknown-id", follow_redirects=False)
    assert response.status_code == 404
    assert response.content == b""


def test_redirect_is_case_sensitive(client):
    response = client.get("/XYZ123", follow_redirects=False)
    assert response.status_code == 404


def test_redirect_logs_lookup_and_target(client, redirect_messages):
    client.get("/xyz123", follow_redirects=False)

    messages = redirect_messages()
    assert len(messages) == 2
    assert re.match(r"^URL: \d{4}-\d{2}-\d{2}T\S+ xyz123$", messages[0])
    assert messages[1] == "xyz123 - https://example.com"


def test_redirect_not_found_skips_target_log(client, redirect_messages):
    client.get("/nothere", follow_redirects=False)

    messages = redirect_messages()
    assert len(messages) == 1
    assert messages[0].startswith("URL: ") and messages[0].endswith(" nothere")


def test_redirect_sink_ignores_root_level(client, redirect_messages):
    root = logging.getLogger()
    previous = root.level
    root.setLevel(logging.ERROR)
    try:
        client.get("/xyz123", follow_redirects=False)
    finally:
        root.setLevel(previous)

    assert len(redirect_messages()) == 2


def test_unhandled_error_becomes_500(store, monkeypatch):
    from fastapi.testclient import TestClient
    from shorturl.db.Connection.memory import get_store

    def broken_get(short_id):
        raise RuntimeError("boom")

    monkeypatch.setattr(store, "get", broken_get)
    app.dependency_overrides[get_store] = lambda: store
    try:
        response = TestClient(app, raise_server_exceptions=False).get("/xyz123", follow_redirects=False)
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.text == "Internal server error"
