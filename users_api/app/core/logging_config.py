"""
Logging setup for the Users API.

Store mutations are logged at INFO, rejected requests at DEBUG and
unhandled failures with a traceback at ERROR, all through module level
loggers.  ``setup_logging`` gives those records somewhere to go: a
console handler and, when ``LOG_FILE`` is set, a file handler.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Apply ``LOG_LEVEL`` to the root logger and attach handlers once.

    ``create_app`` calls this every time it builds an application.  The
    level is applied on every call; handlers are only added while the
    root logger has none, so building several apps (as the tests do) or
    running under a host that already configured logging does not
    duplicate output.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"info"``; anything that is
        not a known level name means ``INFO``.
    logfile : Optional[str]
        Extra file to write records to, UTF‑8 encoded.
    """
    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)

    if root.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
