#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/models/platform_limits.py
--------------------------------------------------
Platform speed/voltage limits for the Robot Savo swerve base.

Derived once at startup from the drivetrain configuration:

    max_linear  = free_speed_rpm / 60 * drive_reduction * wheel_diameter_m * pi
    max_angular = max_linear / hypot(track_width_m / 2, wheelbase_m / 2)

The angular limit is tied to the linear limit and the chassis footprint:
spinning in place at max_angular puts every module at max_linear.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict

from ..kinematics.geometry import ModuleGeometry
from .drivetrain_config import DrivetrainConfig


class LimitsValidationError(ValueError):
    """Raised when a limits model contains invalid values."""


def is_finite_number(x: float) -> bool:
    try:
        return math.isfinite(float(x))
    except (TypeError, ValueError):
        return False


def compute_max_linear_speed(
    free_speed_rpm: float,
    drive_reduction: float,
    wheel_diameter_m: float,
) -> float:
    """
    Straight-line top speed (m/s) from motor free speed and module gearing.
    """
    for name, value in (
        ("free_speed_rpm", free_speed_rpm),
        ("drive_reduction", drive_reduction),
        ("wheel_diameter_m", wheel_diameter_m),
    ):
        if not is_finite_number(value) or float(value) <= 0.0:
            raise LimitsValidationError(f"{name} must be finite and > 0, got {value!r}")
    return float(free_speed_rpm) / 60.0 * float(drive_reduction) * float(wheel_diameter_m) * math.pi


@dataclass(frozen=True)
class PlatformLimits:
    """
    Process-wide immutable limits.

    max_linear_speed_mps    : m/s
    max_angular_speed_radps : rad/s
    max_voltage             : V delivered at max_linear_speed_mps
    """
    max_linear_speed_mps: float
    max_angular_speed_radps: float
    max_voltage: float

    def validate(self) -> "PlatformLimits":
        for name in ("max_linear_speed_mps", "max_angular_speed_radps", "max_voltage"):
            value = getattr(self, name)
            if not is_finite_number(value):
                raise LimitsValidationError(f"{name} must be finite, got {value!r}")
            if float(value) <= 0.0:
                raise LimitsValidationError(f"{name} must be > 0, got {value}")
        return self

    @classmethod
    def from_config(cls, config: DrivetrainConfig) -> "PlatformLimits":
        config.validate()
        max_linear = compute_max_linear_speed(
            config.motor_free_speed_rpm,
            config.drive_reduction,
            config.wheel_diameter_m,
        )
        radius = ModuleGeometry.from_dimensions(config.track_width_m, config.wheelbase_m).radius_m()
        if radius <= 0.0:
            raise LimitsValidationError(f"geometry radius must be > 0, got {radius}")
        return cls(
            max_linear_speed_mps=max_linear,
            max_angular_speed_radps=max_linear / radius,
            max_voltage=float(config.max_voltage),
        ).validate()

    def speed_to_voltage(self, speed_mps: float) -> float:
        """
        Open-loop voltage for a module speed: speed / max_linear * max_voltage.
        """
        return float(speed_mps) / self.max_linear_speed_mps * self.max_voltage

    def to_dict(self) -> Dict[str, float]:
        return {
            "max_linear_speed_mps": float(self.max_linear_speed_mps),
            "max_angular_speed_radps": float(self.max_angular_speed_radps),
            "max_voltage": float(self.max_voltage),
        }


__all__ = [
    "LimitsValidationError",
    "is_finite_number",
    "compute_max_linear_speed",
    "PlatformLimits",
]
