"""Loguru-style logger facade backed by stdlib logging + rich.

Usage::

    from dropletsync.observability.logger import logger

    log = logger.bind(component="droplet")
    log.info("Created droplet {id}", id=123456)

Records go to the ``dropletsync`` logger hierarchy, which does not propagate
and has no handlers until ``observability.logging._setup_logging`` runs.
"""

from __future__ import annotations

import inspect
import logging
import logging.handlers
import os
import sys
from typing import TextIO

from rich.logging import RichHandler

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

ROOT_LOGGER = "dropletsync"

_root = logging.getLogger(ROOT_LOGGER)


def _format_message(msg: str, args: tuple[object, ...], kwargs: dict[str, object]) -> str:
    if kwargs:
        return msg.format(**kwargs)
    if args:
        return msg.format(*args)
    return msg


def _format_context(extras: dict[str, object]) -> str:
    parts = [f"{k}={v}" for k, v in extras.items()]
    return f" [{' '.join(parts)}]" if parts else ""


class BoundLogger:
    __slots__ = ("_extras",)

    def __init__(self, extras: dict[str, object] | None = None) -> None:
        self._extras = extras or {}

    def bind(self, **kwargs: object) -> BoundLogger:
        return BoundLogger({**self._extras, **kwargs})

    def _log(self, level: int, message: str, /, *args: object, **kwargs: object) -> None:
        exc_info = kwargs.pop("exc_info", False)
        # frame 0: _log, frame 1: level method, frame 2: caller
        frame = inspect.stack()[2]
        module = frame.frame.f_globals.get("__name__", ROOT_LOGGER)
        lib_logger = logging.getLogger(module)
        if not lib_logger.isEnabledFor(level):
            return

        text = _format_message(message, args, kwargs) + _format_context(self._extras)
        record = lib_logger.makeRecord(
            name=lib_logger.name,
            level=level,
            fn=frame.filename,
            lno=frame.lineno,
            msg=text,
            args=(),
            exc_info=sys.exc_info() if exc_info else None,
            func=frame.function,
        )
        record.filename = os.path.basename(frame.filename)
        for k, v in self._extras.items():
            setattr(record, k, v)
        lib_logger.handle(record)

    def trace(self, message: str, /, *args: object, **kwargs: object) -> None:
        self._log(TRACE, message, *args, **kwargs)

    def debug(self, message: str, /, *args: object, **kwargs: object) -> None:
        self._log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: str, /, *args: object, **kwargs: object) -> None:
        self._log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str, /, *args: object, **kwargs: object) -> None:
        self._log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str, /, *args: object, **kwargs: object) -> None:
        self._log(logging.ERROR, message, *args, **kwargs)

    def exception(self, message: str, /, *args: object, **kwargs: object) -> None:
        kwargs["exc_info"] = True
        self._log(logging.ERROR, message, *args, **kwargs)


_handler_counter = 0
_handlers: dict[int, logging.Handler] = {}


def _make_file_handler(path: str, *, level: int, max_bytes: int, backups: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backups)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s.%(msecs)03d | %(levelname)-8s | "
        "%(name)s:%(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    return handler


def _make_console_handler(level: int) -> logging.Handler:
    handler = RichHandler(
        level=level,
        show_time=True,
        show_level=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    return handler


class LoguruCompat(BoundLogger):
    """Module-level logger with loguru's ``add``/``remove``/``enable`` surface."""

    __slots__ = ()

    def remove(self, handler_id: int | None = None) -> None:
        if handler_id is None:
            for h in list(_handlers.values()):
                _root.removeHandler(h)
                h.close()
            _handlers.clear()
            return
        if h := _handlers.pop(handler_id, None):
            _root.removeHandler(h)
            h.close()

    def add(
        self,
        sink: str | TextIO,
        *,
        level: str = "DEBUG",
        max_bytes: int = 50 * 1024 * 1024,
        backups: int = 10,
    ) -> int:
        global _handler_counter
        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            numeric_level = logging.DEBUG

        match sink:
            case str() as path:
                handler = _make_file_handler(
                    path, level=numeric_level, max_bytes=max_bytes, backups=backups,
                )
            case _:
                handler = _make_console_handler(numeric_level)

        _root.addHandler(handler)
        _handler_counter += 1
        _handlers[_handler_counter] = handler
        return _handler_counter

    def enable(self, name: str = ROOT_LOGGER) -> None:
        logging.getLogger(name).disabled = False

    def disable(self, name: str = ROOT_LOGGER) -> None:
        logging.getLogger(name).disabled = True


logger = LoguruCompat()

_root.setLevel(TRACE)
_root.propagate = False
