"""Shared fixtures for the API service tests.

Every test gets its own SQLite file under `tmp_path`, so tests never share
state and need no running Postgres.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from ledger_api.main import create_app
from ledger_api.models import create_schema
from ledger_api.repositories import players as players_repo
from ledger_api.repositories import sessions as sessions_repo
from ledger_api.settings import Settings
from ledger_common.db import Database


@pytest.fixture
def database(tmp_path):
    """A `Database` on a fresh SQLite file with the schema created."""
    db = Database(f"sqlite:///{tmp_path / 'ledger.db'}")
    create_schema(db.engine)
    yield db
    db.close()


@pytest.fixture
def make_session(database):
    """Insert a session with sensible defaults; returns the created `Session`."""

    def _make(player_id, buy_in=100.0, cash_out=150.0, game_type="NLH", session_date=date(2024, 1, 1)):
        return sessions_repo.create_session(
            database,
            player_id=player_id,
            buy_in=buy_in,
            cash_out=cash_out,
            game_type=game_type,
            session_date=session_date,
        )

    return _make


@pytest.fixture
def player(database):
    return players_repo.create_player(database, "Alice")


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'api.db'}",
        create_tables=True,
        log_level="WARNING",
    )


@pytest.fixture
def client(settings):
    """TestClient with lifespan running (schema created, engine disposed after)."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
