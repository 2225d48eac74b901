"""Logging for dropletsync."""

from .logger import logger
from .logging import LogConfig

__all__ = ["LogConfig", "logger"]
