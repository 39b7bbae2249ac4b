#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/kinematics/geometry.py
-----------------------------------------------
Fixed module geometry for the Robot Savo swerve chassis.

Offsets are built from two scalars, track width W and wheelbase L, halved and
sign-combined in locked module order:

    FL = ( W/2,  L/2)
    FR = ( W/2, -L/2)
    BL = (-W/2,  L/2)
    BR = (-W/2, -L/2)

Every per-module sequence in `savo_swerve` uses this order.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .conventions import KinematicsValueError, Translation2d, module_index


class GeometryValidationError(KinematicsValueError):
    """Raised when chassis dimensions are not positive finite numbers."""


def _positive(name: str, value: float) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError) as e:
        raise GeometryValidationError(f"{name} must be a number, got {value!r}") from e
    if not math.isfinite(v) or v <= 0.0:
        raise GeometryValidationError(f"{name} must be finite and > 0, got {value!r}")
    return v


def module_offsets(
    track_width_m: float,
    wheelbase_m: float,
) -> Tuple[Translation2d, Translation2d, Translation2d, Translation2d]:
    """
    Return the four module offsets (FL, FR, BL, BR) for a chassis footprint.
    """
    hw = _positive("track_width_m", track_width_m) / 2.0
    hl = _positive("wheelbase_m", wheelbase_m) / 2.0
    return (
        Translation2d(+hw, +hl),
        Translation2d(+hw, -hl),
        Translation2d(-hw, +hl),
        Translation2d(-hw, -hl),
    )


@dataclass(frozen=True)
class ModuleGeometry:
    """
    Immutable module offsets relative to the chassis center.
    """
    track_width_m: float
    wheelbase_m: float
    offsets: Tuple[Translation2d, Translation2d, Translation2d, Translation2d]

    @classmethod
    def from_dimensions(cls, track_width_m: float, wheelbase_m: float) -> "ModuleGeometry":
        return cls(
            track_width_m=float(track_width_m),
            wheelbase_m=float(wheelbase_m),
            offsets=module_offsets(track_width_m, wheelbase_m),
        )

    def offset(self, name) -> Translation2d:
        return self.offsets[module_index(name)]

    def radius_m(self) -> float:
        """
        Distance from chassis center to each module: hypot(W/2, L/2).
        """
        return math.hypot(self.track_width_m / 2.0, self.wheelbase_m / 2.0)

    def as_tuple(self) -> Tuple[Tuple[float, float], ...]:
        return tuple(o.as_tuple() for o in self.offsets)


__all__ = [
    "GeometryValidationError",
    "module_offsets",
    "ModuleGeometry",
]
