"""Player API routes.

Responsibilities:
- player directory (`GET /players`, `GET /players/{id}`)
- player creation (`POST /players`)
- cascade delete of a player and its sessions (`DELETE /players?id=<id>`)

Handlers stay thin: parse/validate request input, call the repository, and
let the app-level error handlers turn `InvalidArgument` / `NotFound` /
`StorageError` into 400 / 404 / 500.
"""

from fastapi import APIRouter, Depends, Query

from ledger_common.db import Database

from ..db import get_db
from ..repositories import players as players_repo
from ..schemas import Player, PlayerCreate
from ..validation import parse_id

router = APIRouter(tags=["players"])


@router.get("/players", response_model=list[Player])
def list_players(db: Database = Depends(get_db)):
    """List all players ordered by id.

    Returns:
        list: `[{ "id": 1, "name": "Bob" }, ...]`.
    """
    return players_repo.list_players(db)


@router.get("/players/{player_id}", response_model=Player)
def get_player(player_id: int, db: Database = Depends(get_db)):
    """Fetch a single player.

    Raises:
        NotFound: 404 if the player does not exist.
    """
    return players_repo.get_player(db, player_id)


@router.post("/players", response_model=Player, status_code=201)
def create_player(body: PlayerCreate, db: Database = Depends(get_db)):
    """Create a player from `{ "name": "..." }`.

    Returns:
        dict: The new player `{ "id": <generated>, "name": "..." }` with status 201.

    Raises:
        InvalidArgument: 400 if the name is blank.
    """
    return players_repo.create_player(db, body.name)


@router.delete("/players")
def delete_player(
    id: str | None = Query(default=None, description="Id of the player to delete."),
    db: Database = Depends(get_db),
):
    """Delete a player and all of their sessions in one transaction.

    Args:
        id: Player id from the query string (`/players?id=3`).
        db: Database handle (injected).

    Returns:
        dict: `{ "message": ..., "sessionsDeleted": <int> }`.

    Raises:
        InvalidArgument: 400 if `id` is missing or not a positive integer.
        NotFound: 404 if the player does not exist; nothing is deleted.
        StorageError: 500 if the transaction fails; nothing is deleted.
    """
    player_id = parse_id(id, "Player ID")
    removed = players_repo.delete_player_cascade(db, player_id)
    return {"message": "Player and associated sessions deleted", "sessionsDeleted": removed}
