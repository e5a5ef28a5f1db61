"""
Logging setup for the record store service.

Root handlers are attached once per process: a console handler and,
when ``LOG_FILE`` is set, a file handler.  The ``record_store_api``
logger can be given its own level (``STORE_LOG_LEVEL``) so that store
operations may be traced at DEBUG while uvicorn and other libraries
stay at the root level.  Unlike the handlers, the store level is
applied on every call, so each app built by ``create_app`` honours
its own settings.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
STORE_LOGGER = "record_store_api"


def _level(name: str) -> int:
    value = getattr(logging, name.upper(), logging.INFO)
    return value if isinstance(value, int) else logging.INFO


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    store_level: Optional[str] = None,
) -> None:
    """Configure the root logger and the ``record_store_api`` logger.

    Parameters
    ----------
    level : str
        Root level name, case insensitive.  Unknown names mean ``INFO``.
    logfile : Optional[str]
        File to log to in addition to the console, resolved against
        the current working directory.
    store_level : Optional[str]
        Level for the ``record_store_api`` logger tree.  When empty the
        logger inherits the root level.
    """
    store_logger = logging.getLogger(STORE_LOGGER)
    store_logger.setLevel(_level(store_level) if store_level else logging.NOTSET)

    root = logging.getLogger()
    if root.handlers:
        # Already configured by an earlier app, the test runner or uvicorn.
        return
    root.setLevel(_level(level))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
