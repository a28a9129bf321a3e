"""API router package.

Most code should import the composed router via:

    from ledger_api.routes import router

The composition itself lives in `ledger_api/routes/api_router.py`.
"""

from .api_router import router
