#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notedoc/logging_utils.py
"""Logging setup for the notedoc command-line interface.

Library modules only create module loggers; handlers are installed here, by
the CLI, once the log level is known. The level comes from the first of these
that is set:

1. ``--trace`` (always ``DEBUG``)
2. ``--log-level``
3. ``log_level`` from the configuration file or ``NOTEDOC_LOG_LEVEL``
4. ``WARNING``

"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from notedoc.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_NAMES
from notedoc.exceptions import ConfigError

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(*candidates: int | str | None, trace_mode: bool = False) -> int:
    """Pick the effective numeric log level.

    Parameters
    ----------
    *candidates : int, str or None
        Levels in priority order; the first one that is set wins
    trace_mode : bool, default False
        Force ``DEBUG`` regardless of the candidates

    Returns
    -------
    int
        Numeric logging level, ``WARNING`` when no candidate is set

    Raises
    ------
    ConfigError
        If the chosen candidate is not a known level name

    Examples
    --------
    >>> resolve_log_level(None, "info")
    20
    >>> resolve_log_level("ERROR", trace_mode=True)
    10

    """
    if trace_mode:
        return logging.DEBUG

    chosen = next((candidate for candidate in candidates if candidate), DEFAULT_LOG_LEVEL)
    if isinstance(chosen, int):
        return chosen

    name = str(chosen).strip().upper()
    if name not in LOG_LEVEL_NAMES:
        raise ConfigError(f"Unknown log level {chosen!r}; expected one of {', '.join(LOG_LEVEL_NAMES)}")
    return int(getattr(logging, name))


def configure_logging(
    log_level: int | str | None,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Install the CLI's log handlers on the root logger.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output.

    Parameters
    ----------
    log_level : int, str or None
        Level name or number; ``None`` means ``WARNING``
    log_file : str, optional
        Also append log records to this file
    trace_mode : bool, default False
        Log at ``DEBUG`` with timestamps and logger names
    stream : TextIO, optional
        Console stream, defaults to ``sys.stderr``

    Returns
    -------
    logging.Logger
        The root logger

    Raises
    ------
    ConfigError
        If ``log_level`` is not a known level name

    """
    level = resolve_log_level(log_level, trace_mode=trace_mode)
    formatter = (
        logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT) if trace_mode else logging.Formatter(PLAIN_FORMAT)
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.debug("Logging to file: %s", log_file)

    return root_logger
