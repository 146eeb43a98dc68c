"""
Pytest configuration and shared fixtures.

Fixtures available to all tests:
  • hit_counter  — the HitCounter injected into the app
  • app          — Flask app on a temporary sqlite file and file server root
  • client       — test client for `app`
  • make_user    — registers a user through the API and returns its JSON
"""

from __future__ import annotations

import os
import sys

import pytest

# Ensure the project root is on the path so the top-level modules resolve.
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from app import create_app  # noqa: E402
from metrics import HitCounter  # noqa: E402


@pytest.fixture
def hit_counter():
    return HitCounter()


@pytest.fixture
def app(tmp_path, hit_counter):
    static_root = tmp_path / "static"
    static_root.mkdir()
    (static_root / "index.html").write_text("<h1>Welcome to Chirpy</h1>")
    (static_root / "assets").mkdir()
    (static_root / "assets" / "logo.txt").write_text("chirp")

    return create_app(
        {
            "TESTING": True,
            "DB_PATH": str(tmp_path / "chirpy.db"),
            "FILESERVER_ROOT": str(static_root),
            "PLATFORM": "",
        },
        hit_counter=hit_counter,
    )


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(client):
    def _factory(email: str = "walt@breakingbad.com") -> dict:
        resp = client.post("/api/users", json={"email": email})
        assert resp.status_code == 201
        return resp.get_json()
    return _factory
