# -*- coding: utf-8 -*-
"""
Robot SAVO — savo_swerve/__init__.py
------------------------------------
Package root exports for `savo_swerve`.

This file provides:
- the package version (kept in `constants.py`, mirrored in setup.py)
- centralized drivetrain defaults/constants

Heavier pieces are imported from their subpackages:

    from savo_swerve.drivetrain import SwerveDrivetrain
    from savo_swerve.kinematics import ChassisSpeeds

ROS modules (`savo_swerve.nodes`) are never imported here.
"""

from __future__ import annotations

from .constants import (
    DEFAULTS,
    NODE_NAME_SWERVE_DRIVER,
    PACKAGE_NAME,
    ROBOT_NAME,
    VERSION,
    SwerveDriverDefaults,
    get_startup_banner,
    get_swerve_driver_defaults,
)

__version__ = VERSION

__all__ = [
    "__version__",
    "VERSION",
    "get_startup_banner",
    "DEFAULTS",
    "SwerveDriverDefaults",
    "get_swerve_driver_defaults",
    "PACKAGE_NAME",
    "ROBOT_NAME",
    "NODE_NAME_SWERVE_DRIVER",
]
