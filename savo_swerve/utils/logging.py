#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/utils/logging.py
-----------------------------------------
Logging helpers for `savo_swerve`.

Modules log the same way whether they run inside a ROS 2 node (rclpy
logger) or in plain Python (tests, dry-run tools, stdlib `logging`).

Typical usage
-------------
from savo_swerve.utils.logging import get_logger_adapter, log_event

logger = get_logger_adapter(self)   # self can be a ROS2 node
log_event(logger, "drivetrain_init", details={"max_mps": 4.2})
"""

from __future__ import annotations

import json
import logging
import sys
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

_LEVEL_DEBUG = "DEBUG"
_LEVEL_INFO = "INFO"
_LEVEL_WARN = "WARN"
_LEVEL_ERROR = "ERROR"

DEFAULT_LOGGER_NAME = "savo_swerve"


def _safe_json(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"), default=str)


def _ensure_std_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """
    Return a configured stdlib logger (idempotent).
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger


@dataclass
class LoggerAdapter:
    """
    Hides whether the underlying logger is an rclpy logger or a stdlib
    `logging.Logger`. Methods follow the ROS logger style:
    debug(), info(), warn(), error().
    """
    target: Any = None
    name: str = DEFAULT_LOGGER_NAME

    def __post_init__(self) -> None:
        if self.target is None:
            self.target = _ensure_std_logger(self.name)

    @property
    def is_std_logger(self) -> bool:
        return isinstance(self.target, logging.Logger)

    def _emit(self, level: str, msg: Any) -> None:
        # rclpy RcutilsLogger and logging.Logger share debug/info/warning/error
        text = str(msg)
        if level == _LEVEL_DEBUG:
            self.target.debug(text)
        elif level == _LEVEL_INFO:
            self.target.info(text)
        elif level == _LEVEL_WARN:
            self.target.warning(text)
        else:
            self.target.error(text)

    def debug(self, msg: Any) -> None:
        self._emit(_LEVEL_DEBUG, msg)

    def info(self, msg: Any) -> None:
        self._emit(_LEVEL_INFO, msg)

    def warn(self, msg: Any) -> None:
        self._emit(_LEVEL_WARN, msg)

    def error(self, msg: Any) -> None:
        self._emit(_LEVEL_ERROR, msg)


def get_logger_adapter(source: Any = None, *, name: str = DEFAULT_LOGGER_NAME) -> LoggerAdapter:
    """
    Create a LoggerAdapter from a ROS2 Node, a ROS2 logger, a stdlib logger,
    an existing adapter, or None (stdlib fallback).
    """
    if isinstance(source, LoggerAdapter):
        return source
    if source is None:
        return LoggerAdapter(target=_ensure_std_logger(name), name=name)
    if hasattr(source, "get_logger") and callable(source.get_logger):
        return LoggerAdapter(target=source.get_logger(), name=name)
    return LoggerAdapter(target=source, name=name)


# =============================================================================
# Structured logging helpers
# =============================================================================
def format_kv(**kwargs: Any) -> str:
    """
    format_kv(module="FR", volts=6.0) -> "module=FR volts=6.0"
    """
    return " ".join(f"{k}={v}" for k, v in kwargs.items())


def format_event(
    event: str,
    *,
    component: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Standardized event line, e.g.
      [drivetrain] drivetrain_init max_mps=4.42 max_radps=13.3
    """
    comp = f"[{component}] " if component else ""
    base = f"{comp}{event}"
    if not details:
        return base
    if all(isinstance(v, (str, int, float, bool)) or v is None for v in details.values()):
        return f"{base} {format_kv(**details)}"
    return f"{base} details={_safe_json(details)}"


def log_event(
    logger: LoggerAdapter,
    event: str,
    *,
    level: str = _LEVEL_INFO,
    component: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> None:
    msg = format_event(event, component=component, details=details)
    lvl = str(level).upper()
    if lvl == _LEVEL_DEBUG:
        logger.debug(msg)
    elif lvl in (_LEVEL_WARN, "WARNING"):
        logger.warn(msg)
    elif lvl == _LEVEL_ERROR:
        logger.error(msg)
    else:
        logger.info(msg)


def log_exception(
    logger: LoggerAdapter,
    exc: BaseException,
    *,
    message: str = "Unhandled exception",
    component: Optional[str] = None,
) -> None:
    """
    Compact one-line exception log (no traceback; high-rate loops call this).
    """
    comp = f"[{component}] " if component else ""
    logger.error(f"{comp}{message} | {exc.__class__.__name__}: {exc}")


@dataclass
class RateLimitedLogger:
    """
    Per-key rate limiter for messages repeated every control cycle.

    rl = RateLimitedLogger(get_logger_adapter(self), period_s=1.0)
    rl.error("module_fault", "FR module set() failed")
    """
    logger: LoggerAdapter
    period_s: float = 1.0
    _last_emit_mono: Dict[str, float] = field(default_factory=dict)

    def _can_emit(self, key: str) -> bool:
        now = time.monotonic()
        last = self._last_emit_mono.get(key)
        if last is None or (now - last) >= max(0.0, float(self.period_s)):
            self._last_emit_mono[key] = now
            return True
        return False

    def info(self, key: str, msg: Any) -> bool:
        if self._can_emit(key):
            self.logger.info(msg)
            return True
        return False

    def warn(self, key: str, msg: Any) -> bool:
        if self._can_emit(key):
            self.logger.warn(msg)
            return True
        return False

    def error(self, key: str, msg: Any) -> bool:
        if self._can_emit(key):
            self.logger.error(msg)
            return True
        return False


__all__ = [
    "DEFAULT_LOGGER_NAME",
    "LoggerAdapter",
    "RateLimitedLogger",
    "get_logger_adapter",
    "format_kv",
    "format_event",
    "log_event",
    "log_exception",
]
