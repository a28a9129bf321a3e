"""Session API routes (`/sessions`)."""

from fastapi import APIRouter, Depends, Query

from ledger_common.db import Database

from ..db import get_db
from ..repositories import sessions as sessions_repo
from ..schemas import Session, SessionCreate
from ..validation import parse_id

router = APIRouter(tags=["sessions"])


@router.get("/sessions", response_model=list[Session])
def list_sessions(
    player_id: str | None = Query(
        default=None,
        alias="playerId",
        description="Only return sessions of this player.",
    ),
    db: Database = Depends(get_db),
):
    """List sessions ordered by date, optionally filtered by `playerId`."""
    pid = parse_id(player_id, "Player ID") if player_id is not None else None
    return sessions_repo.list_sessions(db, pid)


@router.post("/sessions", response_model=Session, status_code=201)
def create_session(body: SessionCreate, db: Database = Depends(get_db)):
    """Record a session.

    Body: `{ "playerId", "buyIn", "cashOut", "gameType", "sessionDate": "YYYY-MM-DD" }`.

    Returns:
        dict: The created session including its id and derived `profit`.

    Raises:
        InvalidArgument: 400 for negative amounts or a blank game type.
        NotFound: 404 if `playerId` does not reference an existing player.
    """
    return sessions_repo.create_session(
        db,
        player_id=body.player_id,
        buy_in=body.buy_in,
        cash_out=body.cash_out,
        game_type=body.game_type,
        session_date=body.session_date,
    )


@router.delete("/sessions")
def delete_session(id: str | None = Query(default=None), db: Database = Depends(get_db)):
    """Delete one session by `?id=`; 400 if the id is missing, 404 if unknown."""
    session_id = parse_id(id, "Session ID")
    sessions_repo.delete_session(db, session_id)
    return {"message": "Session deleted"}
