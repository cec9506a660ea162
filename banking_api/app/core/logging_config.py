"""
Logging setup shared by the API and the Uvicorn server.

``setup_logging`` installs one console handler (and optionally a file
handler taken from ``LOG_FILE``) on the root logger.  Uvicorn's own
loggers are stripped of their handlers and made to propagate, so
request lines and application messages come out in a single format.
``run.py`` starts Uvicorn with ``log_config=None`` to keep it from
reinstalling its defaults.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# Marks handlers installed here, so repeated calls do not stack them.
_HANDLER_TAG = "banking_api"


def _tagged(handler: logging.Handler) -> logging.Handler:
    handler.set_name(_HANDLER_TAG)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and route server logs through it.

    Safe to call once per application instance: the level is always
    applied, handlers only the first time.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives the same records as the console.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(h.get_name() == _HANDLER_TAG for h in root.handlers):
        root.addHandler(_tagged(logging.StreamHandler()))
        if logfile:
            log_path = Path(logfile).resolve()
            root.addHandler(_tagged(logging.FileHandler(log_path, encoding="utf-8")))

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
