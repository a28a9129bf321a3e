"""Error taxonomy for the ledger API.

Repositories raise these; the app factory maps each one to an HTTP status via
the `status_code` class attribute.
"""

from contextlib import contextmanager
from typing import Iterator
import logging

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class LedgerError(Exception):
    """Base class for all ledger errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(LedgerError):
    """Caller-supplied input failed a precondition (missing id, blank name). Not retryable."""

    status_code = 400


class NotFound(LedgerError):
    """The targeted player or session does not exist."""

    status_code = 404


class StorageError(LedgerError):
    """The database failed (connectivity, constraint, transaction). Open transactions are rolled back first."""

    status_code = 500


@contextmanager
def storage_errors(message: str) -> Iterator[None]:
    """Re-raise any SQLAlchemy error in the block as `StorageError(message)`.

    The underlying exception is logged with its traceback and chained as
    `__cause__`; only `message` is meant for clients.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception(message)
        raise StorageError(message) from exc
