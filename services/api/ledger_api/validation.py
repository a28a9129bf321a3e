"""Input checks shared by routes and repositories."""

from .errors import InvalidArgument


def require_positive_id(value, label: str) -> int:
    """Return `value` if it is a positive int, else raise `InvalidArgument`."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgument(f"{label} must be a positive integer")
    return value


def parse_id(raw: str | None, label: str) -> int:
    """Parse an id taken from a query string.

    Args:
        raw: Raw query parameter value (may be None or empty).
        label: Human-readable name used in error messages, e.g. "Player ID".

    Returns:
        int: The parsed id.

    Raises:
        InvalidArgument: If the value is missing, not an integer, or not positive.
    """
    if raw is None or not raw.strip():
        raise InvalidArgument(f"{label} is required")
    try:
        value = int(raw.strip())
    except ValueError:
        raise InvalidArgument(f"{label} must be a positive integer") from None
    return require_positive_id(value, label)
