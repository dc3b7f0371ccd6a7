"""
Logging setup for the coverage-matrix command line.

Log records go to stderr through rich so that matrix output on stdout
(json, csv, the terminal grid) stays clean enough to pipe.
"""

import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = {"quiet": logging.ERROR, "normal": logging.WARNING, "verbose": logging.DEBUG}

FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Install the rich stderr handler, plus a plain file handler if asked.

    ``quiet`` wins over ``verbose``: only errors are shown. Returns the
    ``coverage_matrix`` package logger.
    """
    level = _LEVELS["quiet" if quiet else "verbose" if verbose else "normal"]

    handlers: List[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            markup=False,
            show_path=verbose,
            rich_tracebacks=True,
        )
    ]
    if log_file:
        to_file = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        to_file.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(to_file)

    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True)

    logger = logging.getLogger("coverage_matrix")
    logger.setLevel(level)
    return logger
