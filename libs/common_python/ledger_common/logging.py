"""Shared logging setup.

Every entrypoint (API server, CLI) calls `setup_logging` once so that all
modules logging through `logging.getLogger(__name__)` share one format and
one set of handlers.
"""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def setup_logging(
    level: int | str = logging.INFO,
    log_dir: Path | str | None = None,
) -> Path | None:
    """Configure the root logger with a stdout handler and an optional file handler.

    Args:
        level: Logging level, either a `logging` constant or a name such as "INFO".
        log_dir: Optional directory. When given, a timestamped `.log` file is
            created inside it (e.g. `logs/2026-01-31_14-30-00.log`).

    Returns:
        Path | None: The log file path if one was created, otherwise None.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper() if isinstance(level, str) else level)

    # repeated calls must not stack handlers
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    root_logger.addHandler(stdout_handler)

    if log_dir is None:
        return None

    dir_path = Path(log_dir)
    dir_path.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now(tz=timezone.utc).strftime(LOG_FILE_TIMESTAMP_FORMAT)
    file_path = dir_path / f"{timestamp}.log"
    file_handler = logging.FileHandler(file_path)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)
    return file_path
