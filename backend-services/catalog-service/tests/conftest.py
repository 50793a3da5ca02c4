# backend-services/catalog-service/tests/conftest.py
"""
Pytest configuration and shared fixtures for catalog-service tests
Centralizes the Flask test client, collaborator stubs and sample payloads
"""

import os
import sys
import json
import tempfile
from unittest.mock import MagicMock

import pytest
import requests

# Service root (for app, config, services) and backend-services (for shared)
SERVICE_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, SERVICE_ROOT)
sys.path.insert(0, os.path.abspath(os.path.join(SERVICE_ROOT, '..')))

# The app configures a rotating log file at import time
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="catalog-service-logs-"))

MOVIE_INFO_URL = "http://movie-info"
RATINGS_DATA_URL = "http://ratings-data"

# --- Environment Configuration ---
def pytest_configure(config):
    """Register custom markers to avoid warnings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated, no network).")
    config.addinivalue_line(
        "markers",
        "integration: Integration tests (Flask routes with mocked collaborators).",
    )

def pytest_collection_modifyitems(config, items):
    # auto-tag tests by folder so `-m unit|integration` works consistently
    for item in items:
        path = str(item.fspath)
        if f"{os.sep}integration{os.sep}" in path:
            item.add_marker(pytest.mark.integration)
        elif f"{os.sep}unit{os.sep}" in path:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def catalog_env(monkeypatch):
    """Pin collaborator addresses and the movie id list for every test."""
    monkeypatch.setenv("MOVIE_INFO_SERVICE_URL", MOVIE_INFO_URL)
    monkeypatch.setenv("RATINGS_DATA_SERVICE_URL", RATINGS_DATA_URL)
    monkeypatch.delenv("CATALOG_MOVIE_IDS", raising=False)
    monkeypatch.delenv("DOWNSTREAM_HTTP_TIMEOUT_SECONDS", raising=False)
    yield

# -------------------------------------------------------------------
# Flask app and client fixtures
# -------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    from app import app as flask_app
    flask_app.config["TESTING"] = True
    yield flask_app

@pytest.fixture
def client(app):
    return app.test_client()

# -------------------------------------------------------------------
# Collaborator stubs
# -------------------------------------------------------------------

def fake_response(status_code: int, payload=None, raw: bytes = None):
    """Builds a requests.Response carrying a JSON (or raw) body."""
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = raw if raw is not None else json.dumps(payload).encode()
    resp.url = "http://stub"
    return resp


@pytest.fixture
def make_response():
    return fake_response


@pytest.fixture
def movie_payloads():
    return {
        "1234": {"movieId": "1234", "name": "Inception"},
        "5678": {"movieId": "5678", "name": "Interstellar"},
    }


@pytest.fixture
def rating_payloads():
    return {
        "1234": {"movieId": "1234", "rating": 9},
        "5678": {"movieId": "5678", "rating": 8},
    }


@pytest.fixture
def collaborators(monkeypatch, movie_payloads, rating_payloads):
    """
    Replaces the shared session's GET with a router over the two collaborators.

    Per-URL overrides can be registered through `overrides[url] = response`.
    """
    from services import downstream_clients

    overrides = {}

    def _route(url, **kwargs):
        if url in overrides:
            result = overrides[url]
            if isinstance(result, Exception):
                raise result
            return result
        if url.startswith(f"{MOVIE_INFO_URL}/movies/"):
            movie_id = url.rsplit("/", 1)[-1]
            if movie_id in movie_payloads:
                return fake_response(200, movie_payloads[movie_id])
        if url.startswith(f"{RATINGS_DATA_URL}/ratingsdata/"):
            movie_id = url.rsplit("/", 1)[-1]
            if movie_id in rating_payloads:
                return fake_response(200, rating_payloads[movie_id])
        return fake_response(404, {"error": "not found"})

    mock_get = MagicMock(side_effect=_route)
    monkeypatch.setattr(downstream_clients.session, "get", mock_get)
    mock_get.overrides = overrides
    return mock_get
