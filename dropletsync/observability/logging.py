"""Logging configuration for dropletsync.

The library attaches no handlers on import. Engines embedding the
reconciliation core opt in by calling ``_setup_logging`` with a LogConfig
and undo it with ``_teardown_logging``.

Example:
    from dropletsync.observability.logging import LogConfig, _setup_logging

    handler_ids = _setup_logging(LogConfig(level="DEBUG", console=True))
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from dropletsync.observability.logger import logger

type LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "TRACE"]

_DEFAULT_ROTATION_BYTES = 50 * 1024 * 1024


@dataclass(frozen=True, slots=True)
class LogConfig:
    """Logging configuration.

    Attributes:
        level: Minimum log level for the console.
        file: Path to log file; None disables file output.
        console: Whether to log to stderr through rich.
        rotation: File rotation size (e.g., "50 MB").
        retention: Number of old log files to keep.
    """

    level: LogLevel = "INFO"
    file: str | None = ".dropletsync/dropletsync.log"
    console: bool = False
    rotation: str = "50 MB"
    retention: int = 10


def _parse_rotation_bytes(rotation: str) -> int:
    match rotation.strip().split():
        case [num, unit] if unit.upper() == "KB" and num.isdecimal():
            return int(num) * 1024
        case [num, unit] if unit.upper() == "MB" and num.isdecimal():
            return int(num) * 1024 * 1024
        case _:
            return _DEFAULT_ROTATION_BYTES


def _setup_logging(config: LogConfig) -> list[int]:
    """Configure logging and return handler IDs for cleanup."""
    logger.remove()
    logger.enable()
    handler_ids: list[int] = []

    if config.console:
        handler_ids.append(logger.add(sys.stderr, level=config.level))

    if config.file:
        Path(config.file).parent.mkdir(parents=True, exist_ok=True)
        handler_ids.append(
            logger.add(
                config.file,
                level="DEBUG",
                max_bytes=_parse_rotation_bytes(config.rotation),
                backups=config.retention,
            )
        )

    return handler_ids


def _teardown_logging(handler_ids: list[int]) -> None:
    for hid in handler_ids:
        logger.remove(hid)
    logger.disable()
