# SPDX-License-Identifier: MIT

"""Logging setup for the application: stream handler plus optional file log."""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_ROOT_LOGGER_NAME = "keepsake"


def setup_logging(level: str = "WARNING", log_file: Optional[str | Path] = None) -> None:
    """
    Configure the package logger once per process.

    Args:
        level: Name of the logging level, e.g. "INFO"
        log_file: Optional path of a file that receives the same records
    """
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    logger.setLevel(logging.getLevelName(level.upper()))

    if getattr(logger, "_keepsake_logging_configured", False):
        return

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file is not None:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger._keepsake_logging_configured = True  # type: ignore[attr-defined]
