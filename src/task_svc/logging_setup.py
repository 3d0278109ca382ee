"""Process-wide logging configuration.

Modules obtain their loggers with ``logging.getLogger(__name__)``; this module
only decides where records go and at which level, and is called once from the
application entry point.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Configure the root logger with a single stderr handler.

    Args:
        level: Logging level name (e.g. "DEBUG") or numeric level.

    Raises:
        ValueError: If ``level`` is a string that is not a known level name.
    """
    if isinstance(level, str):
        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            raise ValueError(f"Unknown log level: {level}")
    else:
        numeric_level = level

    root = logging.getLogger()
    root.setLevel(numeric_level)

    # Replace handlers so repeated calls do not duplicate output
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # SQL echo is too chatty below WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
