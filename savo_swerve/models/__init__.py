#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/models/__init__.py
-------------------------------------------
Public exports for `savo_swerve.models`.

Usage examples
--------------
from savo_swerve.models import DrivetrainConfig, PlatformLimits
from savo_swerve.models import ModuleCommand, ModuleCommandSet
"""

from .drivetrain_config import (
    ConfigValidationError,
    DrivetrainConfig,
    ModuleHardwareConfig,
    load_drivetrain_config,
    make_default_drivetrain_config,
)
from .module_state import (
    ModuleCommand,
    ModuleCommandSet,
    ModuleCommandValidationError,
    ModuleState,
)
from .platform_limits import (
    LimitsValidationError,
    PlatformLimits,
    compute_max_linear_speed,
)

__all__ = [
    # drivetrain_config
    "ConfigValidationError",
    "DrivetrainConfig",
    "ModuleHardwareConfig",
    "load_drivetrain_config",
    "make_default_drivetrain_config",
    # module_state
    "ModuleCommand",
    "ModuleCommandSet",
    "ModuleCommandValidationError",
    "ModuleState",
    # platform_limits
    "LimitsValidationError",
    "PlatformLimits",
    "compute_max_linear_speed",
]
