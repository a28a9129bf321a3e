"""Analytics API routes.

Serves the numbers the dashboards chart: totals, win rate, per-session and
cumulative profit, daily profit and buy-in distribution. Aggregation lives in
`ledger_api.analytics`; these handlers only fetch rows and shape the payload.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query

from ledger_common.db import Database

from ..analytics import filter_by_date, player_breakdown, summarize_sessions
from ..db import get_db
from ..repositories import players as players_repo
from ..repositories import sessions as sessions_repo

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/players/{player_id}")
def player_analytics(player_id: int, db: Database = Depends(get_db)):
    """Summary for one player.

    Returns:
        dict: `{ "player": {id, name}, "summary": {...} }`.

    Raises:
        NotFound: 404 if the player does not exist.
    """
    player = players_repo.get_player(db, player_id)
    sessions = sessions_repo.list_sessions(db, player_id)
    return {"player": player, "summary": summarize_sessions(sessions)}


@router.get("/overall")
def overall_analytics(
    day: date | None = Query(
        default=None,
        alias="date",
        description="Restrict to sessions played on this day (YYYY-MM-DD).",
    ),
    db: Database = Depends(get_db),
):
    """Summary across all players plus a per-player breakdown.

    Returns:
        dict: `{ "summary": {...}, "players": [{playerId, name, netProfit, sessionCount, winRate}, ...] }`.
    """
    players = players_repo.list_players(db)
    sessions = sessions_repo.list_sessions(db)
    if day is not None:
        sessions = filter_by_date(sessions, day)

    return {
        "summary": summarize_sessions(sessions),
        "players": player_breakdown(players, sessions),
    }
