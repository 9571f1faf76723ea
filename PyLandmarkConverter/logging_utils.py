"""Logging setup for the landmark-converter command line tool.

Library modules only create their own loggers with
``logging.getLogger(__name__)``. The command line driver attaches the
handlers here: short progress messages on stdout, and a timestamped record
of every step (including the per-token DEBUG messages of the point-pair
parser) in a log file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union


LOGGER_NAME = "PyLandmarkConverter"

DEFAULT_LOG_FILE = "landmark_converter.log"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(
    log_file: Optional[Union[str, Path]] = DEFAULT_LOG_FILE,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Attach console and log-file handlers to the package logger.

    The log file is opened lazily, on the first record written to it, so a
    run that stops before logging anything leaves no file behind. Handlers
    are only attached once; later calls return the configured logger.

    Parameters
    ----------
    log_file : str or Path, optional
        File receiving the full conversion record. None disables it.
    console_level : int, optional
        Lowest level printed on stdout. Default is logging.INFO.
    file_level : int, optional
        Lowest level written to the log file. Default is logging.DEBUG.

    Returns
    -------
    logging.Logger
        The ``PyLandmarkConverter`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(str(log_file), delay=True)
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    # Records stop here; the root logger belongs to the caller.
    logger.propagate = False
    return logger


def reset_logging() -> None:
    """Remove and close all handlers installed by :func:`configure_logging`."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
