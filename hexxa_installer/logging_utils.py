from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "hexxa_installer"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _log_file(logger: logging.Logger) -> Optional[Path]:
    for h in logger.handlers:
        if isinstance(h, logging.FileHandler):
            return Path(h.baseFilename)
    return None


def configure_logging(*, level: int = logging.WARNING, log_path: Optional[str] = None) -> Optional[Path]:
    """Route the installer's log records to stderr and, optionally, a file.

    Handlers hang off the package logger rather than the root logger, and
    records do not propagate further. The first call installs the handlers;
    later calls only change the level. No file is created unless
    ``log_path`` is given, so a dry run leaves the disk untouched.

    Returns the log file in use, if any.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if logger.handlers:
        return _log_file(logger)

    fmt = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    logger.addHandler(console)

    if log_path:
        path = Path(log_path).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)

    logger.propagate = False
    logger.debug("Logging initialized (level=%s, file=%s)", logging.getLevelName(level), log_path)
    return _log_file(logger)
