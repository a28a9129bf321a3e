"""Table definitions.

Queries are written as raw SQL (`sqlalchemy.text`) in the repositories; these
`Table` objects exist so the schema can be created portably on Postgres and
SQLite via `create_schema`.
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, MetaData, Numeric, Table, Text
from sqlalchemy.engine import Engine

metadata = MetaData()

players = Table(
    "players",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", Text, nullable=False),
)

# No ON DELETE CASCADE: removing a player's sessions is done explicitly by
# repositories.players.delete_player_cascade inside one transaction.
sessions = Table(
    "sessions",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("player_id", Integer, ForeignKey("players.id"), nullable=False, index=True),
    Column("buy_in", Numeric(12, 2), nullable=False),
    Column("cash_out", Numeric(12, 2), nullable=False),
    Column("game_type", Text, nullable=False),
    Column("session_date", Date, nullable=False),
)


def create_schema(engine: Engine) -> None:
    """Create `players` and `sessions` if they do not exist yet."""
    metadata.create_all(engine, checkfirst=True)
