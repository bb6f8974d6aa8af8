"""Local preview server over files produced by a build run."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from app import create_app


@pytest.fixture
def client(tmp_path: Path):
    api = tmp_path / "api"
    api.mkdir()
    (api / "de.json").write_text(
        json.dumps({"updatedAt": "2024-01-31T10:00:00.000Z",
                    "data": {"code": "DE", "name": "Germany", "rate": 19}}),
        encoding="utf-8",
    )
    (api / "all.json").write_text(
        json.dumps({"updatedAt": "2024-01-31T10:00:00.000Z",
                    "data": [{"code": "DE", "name": "Germany", "rate": 19}]}),
        encoding="utf-8",
    )
    app = create_app({"TESTING": True, "DIST_DIR": str(tmp_path)})
    return app.test_client()


@pytest.mark.parametrize("path", ["/api/de", "/api/de.json", "/api/DE"])
def test_country_document(client, path: str) -> None:
    resp = client.get(path)
    assert resp.status_code == 200
    assert resp.get_json()["data"] == {"code": "DE", "name": "Germany", "rate": 19}


def test_all_document(client) -> None:
    resp = client.get("/api/all")
    assert resp.status_code == 200
    assert resp.get_json()["data"][0]["code"] == "DE"


def test_missing_country_is_404(client) -> None:
    resp = client.get("/api/fr")
    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_invalid_code_is_400(client) -> None:
    assert client.get("/api/germany").status_code == 400


def test_bare_api_path_serves_all_document(client) -> None:
    resp = client.get("/api")
    assert resp.status_code == 200
    assert resp.get_json()["data"][0]["code"] == "DE"
