"""Player persistence.

Responsibilities:
- list / fetch / create rows in `players`
- cascade delete: remove a player and all of its `sessions` rows atomically

All SQL is parameterized (`:name` placeholders). Storage failures are logged
and re-raised as `StorageError`; every transaction is scoped by
`Database.begin()` so it is rolled back on any error.
"""

from sqlalchemy import text
import logging

from ledger_common.db import Database

from ..errors import InvalidArgument, NotFound, storage_errors
from ..schemas import Player
from ..validation import require_positive_id

logger = logging.getLogger(__name__)


def list_players(db: Database) -> list[Player]:
    """Return all players ordered by id."""
    with storage_errors("Error fetching players"), db.connect() as conn:
        rows = conn.execute(text("SELECT id, name FROM players ORDER BY id")).mappings().all()
    return [Player.model_validate(dict(r)) for r in rows]


def get_player(db: Database, player_id: int) -> Player:
    """Fetch one player.

    Raises:
        InvalidArgument: If `player_id` is not a positive integer.
        NotFound: If no such player exists.
        StorageError: On database failure.
    """
    require_positive_id(player_id, "Player ID")
    with storage_errors("Error fetching player"), db.connect() as conn:
        row = conn.execute(
            text("SELECT id, name FROM players WHERE id = :player_id"),
            {"player_id": player_id},
        ).mappings().first()

    if not row:
        raise NotFound("Player not found")
    return Player.model_validate(dict(row))


def create_player(db: Database, name: str) -> Player:
    """Insert a player and return it with its generated id.

    The stored name is trimmed of surrounding whitespace.

    Raises:
        InvalidArgument: If `name` is empty after trimming.
        StorageError: On database failure.
    """
    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidArgument("Player name is required")

    with storage_errors("Error adding player"), db.begin() as conn:
        new_id = conn.execute(
            text("INSERT INTO players (name) VALUES (:name) RETURNING id"),
            {"name": cleaned},
        ).scalar_one()

    logger.info("Created player id=%s", new_id)
    return Player(id=new_id, name=cleaned)


def delete_player_cascade(db: Database, player_id: int) -> int:
    """Delete a player together with all of its sessions, all-or-nothing.

    Steps, in one transaction:
        1) delete every `sessions` row for the player (zero rows is fine)
        2) delete the `players` row
        3) if step 2 matched nothing, roll back and raise `NotFound`
        4) otherwise commit

    A concurrent reader never sees the sessions gone while the player remains
    (or the reverse), given the database's normal transaction isolation.

    Args:
        db: Database handle.
        player_id: Positive integer id of the player.

    Returns:
        int: Number of sessions removed with the player.

    Raises:
        InvalidArgument: If `player_id` is not a positive integer.
        NotFound: If the player does not exist (nothing is changed).
        StorageError: If either delete or the commit fails (nothing is changed).
    """
    require_positive_id(player_id, "Player ID")

    with storage_errors("Error deleting player"), db.begin() as conn:
        removed_sessions = conn.execute(
            text("DELETE FROM sessions WHERE player_id = :player_id"),
            {"player_id": player_id},
        ).rowcount

        res = conn.execute(
            text("DELETE FROM players WHERE id = :player_id"),
            {"player_id": player_id},
        )
        if res.rowcount == 0:
            # raising inside db.begin() rolls back step 1
            raise NotFound("Player not found")

    logger.info("Deleted player id=%s with %s session(s)", player_id, removed_sessions)
    return removed_sessions
