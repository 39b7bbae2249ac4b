#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/kinematics/conventions.py
--------------------------------------------------
Shared swerve conventions and typed containers for Robot Savo.

Locked conventions
- Module order for tuples/lists everywhere:
    (FL, FR, BL, BR)
- Chassis frame: +x forward, +y left, omega counter-clockwise positive
- Angles are radians unless a name says `_deg`
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


# =============================================================================
# Exceptions
# =============================================================================
class KinematicsError(RuntimeError):
    """Base exception for swerve kinematics helpers."""


class KinematicsValueError(KinematicsError):
    """Raised when invalid kinematics inputs are provided."""


# =============================================================================
# Module identity
# =============================================================================
class ModuleName(str, Enum):
    """
    Canonical swerve module names for Robot Savo.
    """
    FL = "FL"  # Front Left
    FR = "FR"  # Front Right
    BL = "BL"  # Back Left
    BR = "BR"  # Back Right


MODULE_ORDER: Tuple[ModuleName, ModuleName, ModuleName, ModuleName] = (
    ModuleName.FL,
    ModuleName.FR,
    ModuleName.BL,
    ModuleName.BR,
)

MODULE_INDEX: Dict[ModuleName, int] = {name: i for i, name in enumerate(MODULE_ORDER)}

NUM_MODULES = 4


def normalize_module_name(name) -> ModuleName:
    """
    Accept a ModuleName or a case-insensitive string ("fl", "BR", ...).
    """
    if isinstance(name, ModuleName):
        return name
    try:
        return ModuleName(str(name).upper())
    except ValueError as e:
        order = tuple(m.value for m in MODULE_ORDER)
        raise KinematicsValueError(f"Invalid module name {name!r}; expected one of {order}") from e


def module_index(name) -> int:
    return MODULE_INDEX[normalize_module_name(name)]


# =============================================================================
# Typed containers
# =============================================================================
def _finite(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise KinematicsValueError(f"{name} must be a number, got {value!r}")
    v = float(value)
    if not math.isfinite(v):
        raise KinematicsValueError(f"{name} must be finite, got {value!r}")
    return v


@dataclass(frozen=True)
class ChassisSpeeds:
    """
    Body-frame velocity command.

    vx    : m/s, forward
    vy    : m/s, strafe (left positive)
    omega : rad/s, counter-clockwise positive
    """
    vx: float = 0.0
    vy: float = 0.0
    omega: float = 0.0

    @classmethod
    def zero(cls) -> "ChassisSpeeds":
        return cls(0.0, 0.0, 0.0)

    def validate(self) -> "ChassisSpeeds":
        _finite("vx", self.vx)
        _finite("vy", self.vy)
        _finite("omega", self.omega)
        return self

    def is_zero(self) -> bool:
        return self.vx == 0.0 and self.vy == 0.0 and self.omega == 0.0

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.vx, self.vy, self.omega)


@dataclass(frozen=True)
class Translation2d:
    """
    2D offset in the chassis frame, meters.
    """
    x: float
    y: float

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class ModuleState:
    """
    Per-module target for one control cycle.

    speed_mps : signed wheel speed, m/s
    angle_rad : absolute wheel heading, radians
    """
    speed_mps: float = 0.0
    angle_rad: float = 0.0

    def scaled(self, factor: float) -> "ModuleState":
        return ModuleState(speed_mps=self.speed_mps * factor, angle_rad=self.angle_rad)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.speed_mps, self.angle_rad)


# =============================================================================
# Angle helpers
# =============================================================================
def wrap_degrees_180(deg: float) -> float:
    """
    Wrap an angle in degrees to [-180, 180), the NavX yaw range.
    """
    return (float(deg) + 180.0) % 360.0 - 180.0


def describe_swerve_conventions() -> str:
    """
    Compact human-readable summary string for logs/docs.
    """
    order = tuple(m.value for m in MODULE_ORDER)
    return (
        "Robot Savo swerve conventions: "
        f"module_order={order}, frame=(+x forward, +y left), omega=CCW+"
    )


__all__ = [
    "KinematicsError",
    "KinematicsValueError",
    "ModuleName",
    "MODULE_ORDER",
    "MODULE_INDEX",
    "NUM_MODULES",
    "normalize_module_name",
    "module_index",
    "ChassisSpeeds",
    "Translation2d",
    "ModuleState",
    "wrap_degrees_180",
    "describe_swerve_conventions",
]
