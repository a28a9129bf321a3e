"""Session persistence: list (optionally per player), create, delete by id."""

from datetime import date
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
import logging
import math

from ledger_common.db import Database

from ..errors import InvalidArgument, NotFound, storage_errors
from ..schemas import Session
from ..validation import require_positive_id

logger = logging.getLogger(__name__)

_SESSION_COLUMNS = "id, player_id, buy_in, cash_out, game_type, session_date"


def list_sessions(db: Database, player_id: int | None = None) -> list[Session]:
    """Return sessions ordered by date then id, optionally only one player's."""
    where_sql = ""
    params = {}

    if player_id is not None:
        require_positive_id(player_id, "Player ID")
        where_sql = "WHERE player_id = :player_id"
        params["player_id"] = player_id

    with storage_errors("Error fetching sessions"), db.connect() as conn:
        rows = conn.execute(
            text(f"""
                SELECT {_SESSION_COLUMNS}
                FROM sessions
                {where_sql}
                ORDER BY session_date, id
            """),
            params,
        ).mappings().all()

    return [Session.model_validate(dict(r)) for r in rows]


def create_session(
    db: Database,
    player_id: int,
    buy_in: float,
    cash_out: float,
    game_type: str,
    session_date: date,
) -> Session:
    """Insert a session for an existing player.

    The player lookup and the insert share one transaction; the foreign key on
    `sessions.player_id` catches a player deleted concurrently in between.

    Raises:
        InvalidArgument: Non-positive `player_id`, negative or non-finite amounts, or blank `game_type`.
        NotFound: If the player does not exist.
        StorageError: On any other database failure, including integrity errors
            other than the missing player.
    """
    require_positive_id(player_id, "Player ID")
    if not (math.isfinite(buy_in) and math.isfinite(cash_out)):
        raise InvalidArgument("Buy-in and cash-out must be finite amounts")
    if buy_in < 0 or cash_out < 0:
        raise InvalidArgument("Buy-in and cash-out must be non-negative")
    game_type = (game_type or "").strip()
    if not game_type:
        raise InvalidArgument("Game type is required")

    with storage_errors("Error adding session"):
        try:
            with db.begin() as conn:
                exists = conn.execute(
                    text("SELECT 1 FROM players WHERE id = :player_id"),
                    {"player_id": player_id},
                ).first()
                if not exists:
                    raise NotFound("Player not found")

                row = conn.execute(
                    text(f"""
                        INSERT INTO sessions (player_id, buy_in, cash_out, game_type, session_date)
                        VALUES (:player_id, :buy_in, :cash_out, :game_type, :session_date)
                        RETURNING {_SESSION_COLUMNS}
                    """),
                    {
                        "player_id": player_id,
                        "buy_in": float(buy_in),
                        "cash_out": float(cash_out),
                        "game_type": game_type,
                        "session_date": session_date.isoformat(),
                    },
                ).mappings().one()
        except IntegrityError:
            if _player_exists(db, player_id):
                # not the foreign key; let storage_errors report it
                raise
            logger.warning("Session insert for player id=%s rejected by foreign key", player_id)
            raise NotFound("Player not found") from None

    logger.info("Created session id=%s for player id=%s", row["id"], player_id)
    # stored values, e.g. amounts quantized by NUMERIC(12,2)
    return Session.model_validate(dict(row))


def _player_exists(db: Database, player_id: int) -> bool:
    with db.connect() as conn:
        return conn.execute(
            text("SELECT 1 FROM players WHERE id = :player_id"),
            {"player_id": player_id},
        ).first() is not None


def delete_session(db: Database, session_id: int) -> None:
    """Delete exactly one session by id.

    Raises:
        InvalidArgument: If `session_id` is not a positive integer.
        NotFound: If no session has that id.
        StorageError: On database failure.
    """
    require_positive_id(session_id, "Session ID")

    with storage_errors("Error deleting session"), db.begin() as conn:
        res = conn.execute(
            text("DELETE FROM sessions WHERE id = :session_id"),
            {"session_id": session_id},
        )
        if res.rowcount == 0:
            raise NotFound("Session not found")

    logger.info("Deleted session id=%s", session_id)
