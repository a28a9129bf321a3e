"""Smoke tests for the health endpoints and app wiring."""

from unittest import mock

from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError


def test_health(client) -> None:
    """Liveness endpoint answers without touching the database."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "api"}


def test_health_db_ok(client) -> None:
    response = client.get("/health/db")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_health_db_unavailable(client) -> None:
    fault = OperationalError("SELECT 1", {}, Exception("connection refused"))

    with mock.patch.object(Engine, "connect", side_effect=fault):
        response = client.get("/health/db")

    assert response.status_code == 503
    assert response.json() == {"status": "unavailable"}
    # a fresh engine is built on the next request
    assert client.get("/health/db").status_code == 200


def test_app_state_is_wired(client, settings) -> None:
    assert client.app.state.settings is settings
    assert client.app.state.db.url == settings.database_url
