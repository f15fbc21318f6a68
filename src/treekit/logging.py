"""Logging utilities for treekit.

This module provides a custom SPLIT log level and a context manager for
enabling/disabling treekit logging with loguru.

Note:
    Importing this module removes loguru's default stderr handler (ID 0) to
    prevent duplicate output when ``enable_logging()`` adds its own handler.
    If your application configures loguru handlers *before* importing treekit,
    handler 0 may no longer be the default; in that case the removal is a
    no-op (the ``ValueError`` is suppressed).
"""

from __future__ import annotations

import contextlib
import sys
import threading
import warnings
from typing import TYPE_CHECKING, ClassVar, Final, Literal

from loguru import logger

from treekit.settings import get_settings

if TYPE_CHECKING:
    from types import TracebackType

    from loguru import Record

PACKAGE_NAME: Final[str] = __name__.split(".")[0]

with contextlib.suppress(ValueError):
    logger.remove(0)

# Register custom SPLIT level (between DEBUG=10 and INFO=20)
SPLIT_LEVEL: Final[str] = "SPLIT"
SPLIT_LEVEL_NUMBER: Final[int] = 15


def _register_split_level() -> None:
    """Register the SPLIT custom log level with loguru.

    Looks up the SPLIT level and registers it when missing. If it already
    exists with a different numeric value, emits a UserWarning because loguru
    does not permit changing the numeric value of an existing level.
    """
    try:
        existing_level = logger.level(SPLIT_LEVEL)
    except ValueError:
        logger.level(SPLIT_LEVEL, no=SPLIT_LEVEL_NUMBER, icon="🌿")
    else:
        if existing_level.no != SPLIT_LEVEL_NUMBER:
            msg = f"SPLIT level already registered with numeric value {existing_level.no}, expected {SPLIT_LEVEL_NUMBER}"
            warnings.warn(msg, stacklevel=2)


_register_split_level()

type LogLevel = Literal[
    "TRACE",
    "DEBUG",
    "SPLIT",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
]

type LogFormat = Literal["short", "full"]

_SHORT_FORMAT: Final[str] = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "  # noqa: RUF027 - loguru format string
    "<cyan>{function}</cyan> - "
    "<level>{message}</level> {extra}"
)
_FULL_FORMAT: Final[str] = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "  # noqa: RUF027 - loguru format string
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level> {extra}"
)


class LoggingHandle:
    """Handle for managing treekit logging lifecycle.

    Stores the handler ID from logger.add() and provides cleanup via disable()
    or automatic cleanup through context manager protocol.

    Examples:
        >>> with enable_logging(level="SPLIT"):  # doctest: +SKIP
        ...     tree = build_tree(records, schema)
    """

    _active_ids: ClassVar[set[int]] = set()
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, handler_id: int) -> None:
        """Initialize the logging handle.

        Args:
            handler_id (int): The loguru handler ID from logger.add().
        """
        self.handler_id: int | None = handler_id
        with LoggingHandle._lock:
            LoggingHandle._active_ids.add(handler_id)

    def disable(self) -> None:
        """Remove the handler associated with this logging handle.

        When this is the last active handle, ``logger.disable("treekit")`` is
        called to suppress treekit log messages again.
        """
        with LoggingHandle._lock:
            if self.handler_id is None:
                return
            LoggingHandle._active_ids.discard(self.handler_id)
            with contextlib.suppress(ValueError):
                logger.remove(self.handler_id)
            self.handler_id = None
            if not LoggingHandle._active_ids:
                logger.disable(PACKAGE_NAME)

    def __enter__(self) -> LoggingHandle:
        """Enter context manager.

        Returns:
            LoggingHandle: This handle instance.
        """
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit context manager and disable logging."""
        self.disable()

    @classmethod
    def get_active_handle_count(cls) -> int:
        """Return the number of currently active logging handles.

        Returns:
            int: Count of active handles that have not been disabled.
        """
        with cls._lock:
            return len(cls._active_ids)


def enable_logging(
    *,
    level: LogLevel | None = None,
    log_format: LogFormat | None = None,
) -> LoggingHandle:
    """Enable treekit logging on stderr.

    Use this to watch tree induction: training start and finish are logged at
    INFO, every chosen split at SPLIT, and every leaf at DEBUG.

    Args:
        level (LogLevel | None): Minimum log level to display. Defaults to
            `TreeKitSettings.log_level`. Lower to "SPLIT" to see each chosen
            question, or "DEBUG" to also see leaves.
        log_format (LogFormat | None): "short" shows just the function name;
            "full" adds module:function:line. Defaults to
            `TreeKitSettings.log_format`.

    Returns:
        LoggingHandle: Independent handle for managing the logging handler.
    """
    settings = get_settings()
    level = level or settings.log_level
    log_format = log_format or settings.log_format

    logger.enable(PACKAGE_NAME)

    handler_id = logger.add(
        sys.stderr,
        level=level,
        filter=_is_treekit_record,
        format=_SHORT_FORMAT if log_format == "short" else _FULL_FORMAT,
    )

    return LoggingHandle(handler_id)


def _is_treekit_record(record: Record) -> bool:
    """Pass only records emitted from inside the treekit package.

    Args:
        record (Record): The loguru Record object to filter.

    Returns:
        bool: True if the record is from the treekit package, False otherwise.
    """
    name = record["name"]
    return name is not None and name.startswith(PACKAGE_NAME)
