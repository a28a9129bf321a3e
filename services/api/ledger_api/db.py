"""Database access for route handlers.

The app factory attaches one `ledger_common.db.Database` to `app.state.db`;
`get_db` hands it to handlers via `Depends(get_db)`. Handlers never open
connections themselves: repositories scope every connection/transaction with
`db.begin()` / `db.connect()`, so nothing is left open when a request ends.
"""

from fastapi import Request

from ledger_common.db import Database


def get_db(request: Request) -> Database:
    """FastAPI dependency returning the application's `Database`."""
    return request.app.state.db
