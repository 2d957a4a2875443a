"""Tests for the modular `/api/example` routes."""

import pytest
from fastapi.testclient import TestClient

from web.services.examples import InvalidExampleIdError, get_example


def test_example_index(client: TestClient):
    resp = client.get("/api/example")
    assert resp.status_code == 200
    assert resp.json() == {
        "message": "Example route",
        "endpoints": ["/api/example", "/api/example/:id"],
    }


def test_example_item_echoes_id(client: TestClient):
    resp = client.get("/api/example/42")
    assert resp.status_code == 200
    assert resp.json() == {"id": "42", "message": "Fetched example with id: 42"}


def test_example_item_rejects_dotdot(client: TestClient):
    resp = client.get("/api/example/a..b")
    assert resp.status_code == 400
    assert "a..b" in resp.json()["detail"]


@pytest.mark.parametrize("bad_id", ["", "   ", "a/b", "a\\b", ".."])
def test_get_example_invalid_ids(bad_id):
    with pytest.raises(InvalidExampleIdError):
        get_example(bad_id)


def test_unknown_api_route_is_404(client: TestClient):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Not Found"}


def test_example_item_rejects_blank_id(client: TestClient):
    resp = client.get("/api/example/%20")
    assert resp.status_code == 400
