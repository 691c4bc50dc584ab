"""Package-wide logging for graph_algos.

All modules log through children of the ``graph_algos`` logger, obtained
with :func:`get_logger`. The package logger owns the only handler; its level
starts at INFO, or at the level named by the ``GRAPH_ALGOS_LOG_LEVEL``
environment variable when that is set.
"""

import logging
import os
import sys
from contextlib import contextmanager
from time import perf_counter
from typing import Iterator, Optional

ROOT_LOGGER_NAME = "graph_algos"
LOG_LEVEL_ENV_VAR = "GRAPH_ALGOS_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def level_from_env(default: int = logging.INFO) -> int:
    """Return the level named by ``GRAPH_ALGOS_LOG_LEVEL``, or ``default``.

    Accepts level names (``debug``, ``WARNING``) and numeric levels; anything
    else falls back to ``default``.
    """
    raw = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the single handler on the ``graph_algos`` logger.

    Only the first call after import (or after :func:`reset_logging`) has any
    effect, so handlers never accumulate.

    Args:
        level: Logging level; defaults to :func:`level_from_env`.
        format_string: Record format; defaults to :data:`DEFAULT_FORMAT`.
        handler: Destination handler; defaults to a stdout StreamHandler.
    """
    global _configured
    if _configured:
        return

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(level_from_env() if level is None else level)

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # Records still reach the root logger, where pytest's caplog listens.
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (usually the caller's ``__name__``).

    The returned logger has no handler or level of its own; both come from
    the ``graph_algos`` logger.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``graph_algos`` logger and its handlers."""
    setup_root_logger()
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler and level so the next setup starts fresh (tests)."""
    global _configured
    _configured = False

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


@contextmanager
def timed(
    logger: logging.Logger, label: str, level: int = logging.DEBUG
) -> Iterator[None]:
    """Log how long the ``with`` body took, as ``"<label> took 0.012s"``.

    Nothing is logged if the body raises.
    """
    start = perf_counter()
    yield
    if logger.isEnabledFor(level):
        logger.log(level, f"{label} took {perf_counter() - start:.3f}s")


setup_root_logger()
