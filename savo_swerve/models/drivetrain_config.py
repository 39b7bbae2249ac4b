#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/models/drivetrain_config.py
----------------------------------------------------
Single configuration structure for the Robot Savo swerve drivetrain.

One `DrivetrainConfig` is built at startup (from ROS parameters, a YAML file,
or the defaults in `constants.py`) and passed into the drive loop. Nothing in
the control path reads compiled-in constants directly.

YAML layout (`config/swerve_drivetrain.yaml`)
---------------------------------------------
swerve_driver_node:
  ros__parameters:
    track_width_m: 0.4699
    wheelbase_m: 0.4699
    motor_free_speed_rpm: 5880.0
    drive_reduction: 0.14823529
    wheel_diameter_m: 0.10033
    max_voltage: 12.0
    modules:
      FL: {drive_motor_id: 5, steer_motor_id: 6, steer_encoder_id: 32, steer_offset_deg: -307.8}
      ...

Both the ROS params wrapper and a bare mapping are accepted. Module steer
offsets may be given as `steer_offset_rad` or `steer_offset_deg`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import yaml

from ..constants import (
    BACK_LEFT_MODULE_DEFAULT,
    BACK_RIGHT_MODULE_DEFAULT,
    FRONT_LEFT_MODULE_DEFAULT,
    FRONT_RIGHT_MODULE_DEFAULT,
    MAX_VOLTAGE_DEFAULT,
    MK4I_L2_DRIVE_REDUCTION,
    MK4I_WHEEL_DIAMETER_M,
    NEO_FREE_SPEED_RPM,
    TRACK_WIDTH_M_DEFAULT,
    WHEELBASE_M_DEFAULT,
)
from ..kinematics.conventions import MODULE_ORDER, ModuleName, normalize_module_name


# =============================================================================
# Exceptions
# =============================================================================
class ConfigValidationError(ValueError):
    """Raised when a drivetrain configuration contains invalid values."""


# =============================================================================
# Helpers
# =============================================================================
def _positive_float(name: str, value: Any) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigValidationError(f"{name} must be a number, got {value!r}") from e
    if not math.isfinite(v) or v <= 0.0:
        raise ConfigValidationError(f"{name} must be finite and > 0, got {value!r}")
    return v


def _finite_float(name: str, value: Any) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigValidationError(f"{name} must be a number, got {value!r}") from e
    if not math.isfinite(v):
        raise ConfigValidationError(f"{name} must be finite, got {value!r}")
    return v


def _int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigValidationError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigValidationError(f"{name} must be an integer, got {value!r}") from e


# =============================================================================
# Per-module hardware identity
# =============================================================================
@dataclass(frozen=True)
class ModuleHardwareConfig:
    """
    Hardware identity for one swerve module.

    Opaque to the control core; handed to whatever builds the actuator
    handles. `steer_offset_rad` aligns the steer sensor zero with the
    physical wheel-forward direction.
    """
    drive_motor_id: int
    steer_motor_id: int
    steer_encoder_id: int
    steer_offset_rad: float = 0.0

    @classmethod
    def from_tuple(cls, values: Tuple[int, int, int, float]) -> "ModuleHardwareConfig":
        drive, steer, encoder, offset = values
        return cls(drive, steer, encoder, offset)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, name: str = "module") -> "ModuleHardwareConfig":
        if "steer_offset_rad" in data:
            offset = _finite_float(f"{name}.steer_offset_rad", data["steer_offset_rad"])
        elif "steer_offset_deg" in data:
            offset = math.radians(_finite_float(f"{name}.steer_offset_deg", data["steer_offset_deg"]))
        else:
            offset = 0.0
        try:
            return cls(
                drive_motor_id=_int(f"{name}.drive_motor_id", data["drive_motor_id"]),
                steer_motor_id=_int(f"{name}.steer_motor_id", data["steer_motor_id"]),
                steer_encoder_id=_int(f"{name}.steer_encoder_id", data["steer_encoder_id"]),
                steer_offset_rad=offset,
            ).validate(name=name)
        except KeyError as e:
            raise ConfigValidationError(f"{name} is missing required key {e.args[0]!r}") from e

    def validate(self, *, name: str = "module") -> "ModuleHardwareConfig":
        _int(f"{name}.drive_motor_id", self.drive_motor_id)
        _int(f"{name}.steer_motor_id", self.steer_motor_id)
        _int(f"{name}.steer_encoder_id", self.steer_encoder_id)
        if not math.isfinite(float(self.steer_offset_rad)):
            raise ConfigValidationError(
                f"{name}.steer_offset_rad must be finite, got {self.steer_offset_rad!r}"
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "drive_motor_id": int(self.drive_motor_id),
            "steer_motor_id": int(self.steer_motor_id),
            "steer_encoder_id": int(self.steer_encoder_id),
            "steer_offset_rad": float(self.steer_offset_rad),
        }


def _default_modules() -> Dict[ModuleName, ModuleHardwareConfig]:
    return {
        ModuleName.FL: ModuleHardwareConfig.from_tuple(FRONT_LEFT_MODULE_DEFAULT),
        ModuleName.FR: ModuleHardwareConfig.from_tuple(FRONT_RIGHT_MODULE_DEFAULT),
        ModuleName.BL: ModuleHardwareConfig.from_tuple(BACK_LEFT_MODULE_DEFAULT),
        ModuleName.BR: ModuleHardwareConfig.from_tuple(BACK_RIGHT_MODULE_DEFAULT),
    }


# =============================================================================
# Drivetrain configuration
# =============================================================================
@dataclass(frozen=True)
class DrivetrainConfig:
    """
    Geometry, gearing and module identity for one physical chassis.
    """
    track_width_m: float = TRACK_WIDTH_M_DEFAULT
    wheelbase_m: float = WHEELBASE_M_DEFAULT
    motor_free_speed_rpm: float = NEO_FREE_SPEED_RPM
    drive_reduction: float = MK4I_L2_DRIVE_REDUCTION
    wheel_diameter_m: float = MK4I_WHEEL_DIAMETER_M
    max_voltage: float = MAX_VOLTAGE_DEFAULT
    modules: Mapping[ModuleName, ModuleHardwareConfig] = field(default_factory=_default_modules)
    profile_name: str = "robot_savo_mk4i_l2_neo"

    def __post_init__(self) -> None:
        # read-only copy
        if isinstance(self.modules, Mapping):
            object.__setattr__(self, "modules", MappingProxyType(dict(self.modules)))

    def validate(self) -> "DrivetrainConfig":
        _positive_float("track_width_m", self.track_width_m)
        _positive_float("wheelbase_m", self.wheelbase_m)
        _positive_float("motor_free_speed_rpm", self.motor_free_speed_rpm)
        _positive_float("drive_reduction", self.drive_reduction)
        _positive_float("wheel_diameter_m", self.wheel_diameter_m)
        _positive_float("max_voltage", self.max_voltage)

        if not isinstance(self.modules, Mapping):
            raise ConfigValidationError(f"modules must be a mapping, got {type(self.modules).__name__}")
        missing = [m.value for m in MODULE_ORDER if m not in self.modules]
        if missing:
            raise ConfigValidationError(f"modules missing entries for {missing}")
        for name in MODULE_ORDER:
            self.modules[name].validate(name=name.value)

        if not isinstance(self.profile_name, str) or not self.profile_name.strip():
            raise ConfigValidationError("profile_name must be a non-empty string")
        return self

    def module(self, name) -> ModuleHardwareConfig:
        return self.modules[normalize_module_name(name)]

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "DrivetrainConfig":
        """
        Build from a plain dict. Missing keys fall back to package defaults.
        """
        data = dict(data or {})
        defaults = cls()

        modules = dict(defaults.modules)
        raw_modules = data.get("modules") or {}
        if not isinstance(raw_modules, Mapping):
            raise ConfigValidationError(f"modules must be a mapping, got {type(raw_modules).__name__}")
        for key, value in raw_modules.items():
            try:
                name = ModuleName(str(key).upper())
            except ValueError as e:
                raise ConfigValidationError(f"Unknown module {key!r} in modules") from e
            if not isinstance(value, Mapping):
                raise ConfigValidationError(f"modules.{name.value} must be a mapping")
            modules[name] = ModuleHardwareConfig.from_mapping(value, name=name.value)

        return cls(
            track_width_m=data.get("track_width_m", defaults.track_width_m),
            wheelbase_m=data.get("wheelbase_m", defaults.wheelbase_m),
            motor_free_speed_rpm=data.get("motor_free_speed_rpm", defaults.motor_free_speed_rpm),
            drive_reduction=data.get("drive_reduction", defaults.drive_reduction),
            wheel_diameter_m=data.get("wheel_diameter_m", defaults.wheel_diameter_m),
            max_voltage=data.get("max_voltage", defaults.max_voltage),
            modules=modules,
            profile_name=str(data.get("profile_name", defaults.profile_name)),
        ).validate()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "profile_name": self.profile_name,
            "track_width_m": float(self.track_width_m),
            "wheelbase_m": float(self.wheelbase_m),
            "motor_free_speed_rpm": float(self.motor_free_speed_rpm),
            "drive_reduction": float(self.drive_reduction),
            "wheel_diameter_m": float(self.wheel_diameter_m),
            "max_voltage": float(self.max_voltage),
            "modules": {name.value: self.modules[name].to_dict() for name in MODULE_ORDER},
        }


# =============================================================================
# Loading
# =============================================================================
def _unwrap_ros_params(data: Mapping[str, Any]) -> Mapping[str, Any]:
    """
    Accept `{node: {ros__parameters: {...}}}` as well as a bare mapping.
    """
    if "ros__parameters" in data:
        return data["ros__parameters"] or {}
    if len(data) == 1:
        (inner,) = data.values()
        if isinstance(inner, Mapping) and "ros__parameters" in inner:
            return inner["ros__parameters"] or {}
    return data


def load_drivetrain_config(path: Union[str, Path]) -> DrivetrainConfig:
    """
    Load and validate a drivetrain config from a YAML file.
    """
    p = Path(path)
    with p.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ConfigValidationError(f"{p}: top level must be a mapping, got {type(raw).__name__}")
    return DrivetrainConfig.from_mapping(_unwrap_ros_params(raw))


def make_default_drivetrain_config() -> DrivetrainConfig:
    """
    Canonical Robot Savo swerve profile (SDS MK4i L2, NEO drive motors).
    """
    return DrivetrainConfig().validate()


__all__ = [
    "ConfigValidationError",
    "ModuleHardwareConfig",
    "DrivetrainConfig",
    "load_drivetrain_config",
    "make_default_drivetrain_config",
]
