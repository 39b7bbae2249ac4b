# -*- coding: utf-8 -*-
"""
Robot SAVO — savo_swerve/utils/__init__.py
------------------------------------------
Utility exports for `savo_swerve`.

    from savo_swerve.utils import get_logger_adapter, log_event
    from savo_swerve.utils import ParamLoader
"""

from __future__ import annotations

from .logging import (
    LoggerAdapter,
    RateLimitedLogger,
    format_event,
    format_kv,
    get_logger_adapter,
    log_event,
    log_exception,
)
from .param_loader import ParamLoader, ParamLoadSummary, ParamRecord

__all__ = [
    "LoggerAdapter",
    "RateLimitedLogger",
    "format_event",
    "format_kv",
    "get_logger_adapter",
    "log_event",
    "log_exception",
    "ParamLoader",
    "ParamLoadSummary",
    "ParamRecord",
]
