#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/kinematics/__init__.py
-----------------------------------------------
Public exports for the `savo_swerve.kinematics` package.

Module order convention (Robot Savo swerve, locked)
- (FL, FR, BL, BR)

Examples
--------
from savo_swerve.kinematics import ChassisSpeeds, ModuleGeometry, to_module_states
from savo_swerve.kinematics import desaturate_module_speeds
"""

from __future__ import annotations

from .conventions import (
    MODULE_INDEX,
    MODULE_ORDER,
    NUM_MODULES,
    ChassisSpeeds,
    KinematicsError,
    KinematicsValueError,
    ModuleName,
    ModuleState,
    Translation2d,
    describe_swerve_conventions,
    module_index,
    normalize_module_name,
    wrap_degrees_180,
)
from .desaturation import desaturate_module_speeds, peak_speed
from .geometry import GeometryValidationError, ModuleGeometry, module_offsets
from .swerve import SwerveKinematics, module_vectors, to_module_states


__all__ = [
    # conventions
    "MODULE_INDEX",
    "MODULE_ORDER",
    "NUM_MODULES",
    "ChassisSpeeds",
    "KinematicsError",
    "KinematicsValueError",
    "ModuleName",
    "ModuleState",
    "Translation2d",
    "describe_swerve_conventions",
    "module_index",
    "normalize_module_name",
    "wrap_degrees_180",
    # geometry
    "GeometryValidationError",
    "ModuleGeometry",
    "module_offsets",
    # transform
    "SwerveKinematics",
    "module_vectors",
    "to_module_states",
    # desaturation
    "desaturate_module_speeds",
    "peak_speed",
]
