#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/drivetrain.py
--------------------------------------
Periodic swerve drive loop for Robot Savo.

Two entry points with different rates:

- drive(speeds) : called by any producer (teleop, planner) at any rate.
                  Stores the command under a lock. Last write wins.
- tick()        : called by the scheduler once per control cycle.
                  Turns the stored command into four (voltage, angle) pairs
                  and hands them to the modules in FL, FR, BL, BR order.

Pipeline per tick
-----------------
stored ChassisSpeeds
  -> SwerveKinematics.to_module_states()
  -> desaturate_module_speeds(max_linear_speed)
  -> PlatformLimits.speed_to_voltage()
  -> ModuleCommandSet
  -> module.set(voltage, angle_rad)  x4

All four commands are computed before the first set() call. If a module
raises, the cycle stops there, the failure is logged (rate-limited) and the
original exception propagates to the scheduler.

No ROS imports here; see `savo_swerve.nodes.swerve_driver_node` for the host.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from .drivers.interfaces import SwerveModuleActuator
from .heading.heading_source import HeadingSource
from .kinematics.conventions import (
    MODULE_ORDER,
    NUM_MODULES,
    ChassisSpeeds,
    KinematicsValueError,
    normalize_module_name,
)
from .kinematics.desaturation import desaturate_module_speeds
from .kinematics.geometry import ModuleGeometry
from .kinematics.swerve import SwerveKinematics
from .models.drivetrain_config import DrivetrainConfig
from .models.module_state import ModuleCommandSet
from .models.platform_limits import PlatformLimits
from .utils.logging import LoggerAdapter, RateLimitedLogger, get_logger_adapter, log_event


# =============================================================================
# Errors
# =============================================================================
class DrivetrainError(RuntimeError):
    """Base class for drive-loop failures."""


class DrivetrainConfigError(DrivetrainError, ValueError):
    """Raised when the drive loop is built with missing or invalid collaborators."""


class HeadingUnavailableError(DrivetrainError):
    """Raised when a heading is requested but no heading source was wired."""


ModuleHandles = Union[Mapping[Any, SwerveModuleActuator], Sequence[SwerveModuleActuator]]


def _order_modules(modules: ModuleHandles) -> Tuple[SwerveModuleActuator, ...]:
    """
    Accept a mapping keyed by module name or a 4-sequence in FL, FR, BL, BR order.
    """
    if modules is None:
        raise DrivetrainConfigError("modules are required")

    if isinstance(modules, Mapping):
        by_name: Dict[Any, SwerveModuleActuator] = {}
        for key, handle in modules.items():
            try:
                by_name[normalize_module_name(key)] = handle
            except KinematicsValueError as e:
                raise DrivetrainConfigError(f"unknown module key {key!r}") from e
        missing = [n.value for n in MODULE_ORDER if n not in by_name]
        if missing:
            raise DrivetrainConfigError(f"missing module handles: {missing}")
        ordered = tuple(by_name[n] for n in MODULE_ORDER)
    else:
        ordered = tuple(modules)
        if len(ordered) != NUM_MODULES:
            raise DrivetrainConfigError(
                f"expected {NUM_MODULES} module handles, got {len(ordered)}"
            )

    for name, handle in zip(MODULE_ORDER, ordered):
        if handle is None or not callable(getattr(handle, "set", None)):
            raise DrivetrainConfigError(f"{name.value} module handle has no set(voltage, angle_rad)")
    return ordered


# =============================================================================
# Drive loop
# =============================================================================
class SwerveDrivetrain:
    """
    Swerve drive loop: command intake, per-cycle computation and emission.

    Args:
        config_or_limits: a DrivetrainConfig (limits and geometry derived
            from it) or a ready PlatformLimits (geometry then required)
        modules: four module handles, mapping or ordered sequence
        heading_source: optional HeadingSource for zero/rotation queries
        logger: LoggerAdapter, ROS node/logger, stdlib logger or None
        geometry: ModuleGeometry, only used with a PlatformLimits
        fault_log_period_s: rate limit for repeated module failure logs
    """

    def __init__(
        self,
        config_or_limits: Union[DrivetrainConfig, PlatformLimits],
        modules: ModuleHandles,
        heading_source: Optional[HeadingSource] = None,
        logger: Any = None,
        *,
        geometry: Optional[ModuleGeometry] = None,
        fault_log_period_s: float = 1.0,
    ) -> None:
        if isinstance(config_or_limits, DrivetrainConfig):
            config = config_or_limits.validate()
            self.limits = PlatformLimits.from_config(config)
            self.geometry = ModuleGeometry.from_dimensions(config.track_width_m, config.wheelbase_m)
        elif isinstance(config_or_limits, PlatformLimits):
            if geometry is None:
                raise DrivetrainConfigError("geometry is required when building from PlatformLimits")
            self.limits = config_or_limits.validate()
            self.geometry = geometry
        else:
            raise DrivetrainConfigError(
                f"expected DrivetrainConfig or PlatformLimits, got {type(config_or_limits).__name__}"
            )

        self.modules = _order_modules(modules)
        self.heading_source = heading_source
        self.logger: LoggerAdapter = get_logger_adapter(logger, name="savo_swerve.drivetrain")
        self._rl = RateLimitedLogger(self.logger, period_s=fault_log_period_s)

        self._kinematics = SwerveKinematics(self.geometry)
        self._lock = threading.Lock()
        self._tick_lock = threading.Lock()
        self._command = ChassisSpeeds.zero()
        self._last_set: Optional[ModuleCommandSet] = None
        self._seq = 0

        log_event(
            self.logger,
            "drivetrain_init",
            component="drivetrain",
            details={
                "max_mps": round(self.limits.max_linear_speed_mps, 4),
                "max_radps": round(self.limits.max_angular_speed_radps, 4),
                "max_voltage": self.limits.max_voltage,
                "heading": self.heading_source is not None,
            },
        )

    # -------------------------------------------------------------------------
    # Command intake
    # -------------------------------------------------------------------------
    def drive(self, speeds: ChassisSpeeds) -> None:
        """
        Store the desired chassis motion. No computation, no actuator calls.
        """
        if not isinstance(speeds, ChassisSpeeds):
            raise TypeError(f"speeds must be ChassisSpeeds, got {type(speeds).__name__}")
        speeds.validate()
        with self._lock:
            self._command = speeds

    def stop(self) -> None:
        self.drive(ChassisSpeeds.zero())

    def current_command(self) -> ChassisSpeeds:
        with self._lock:
            return self._command

    # -------------------------------------------------------------------------
    # Periodic step
    # -------------------------------------------------------------------------
    def _compute(self, speeds: ChassisSpeeds) -> ModuleCommandSet:
        # caller holds _tick_lock; advances held angles and seq
        states = self._kinematics.to_module_states(speeds)
        states = desaturate_module_speeds(states, self.limits.max_linear_speed_mps)
        pairs = [(self.limits.speed_to_voltage(s.speed_mps), s.angle_rad) for s in states]
        self._seq += 1
        return ModuleCommandSet.from_pairs(self._seq, pairs)

    def tick(self) -> ModuleCommandSet:
        """
        Run one control cycle and return what was sent to the modules.
        """
        with self._tick_lock:
            speeds = self.current_command()
            command_set = self._compute(speeds)

            for handle, cmd in zip(self.modules, command_set.commands):
                try:
                    handle.set(cmd.voltage, cmd.angle_rad)
                except Exception as e:
                    self._rl.error(
                        f"module_command_failed:{cmd.module.value}",
                        "[drivetrain] module_command_failed "
                        f"module={cmd.module.value} seq={command_set.seq} "
                        f"| {e.__class__.__name__}: {e}",
                    )
                    raise
            self._last_set = command_set
            return command_set

    def last_command_set(self) -> Optional[ModuleCommandSet]:
        """
        Most recent command set that every module accepted.
        """
        return self._last_set

    @property
    def seq(self) -> int:
        return self._seq

    # -------------------------------------------------------------------------
    # Heading
    # -------------------------------------------------------------------------
    def _require_heading(self) -> HeadingSource:
        if self.heading_source is None:
            raise HeadingUnavailableError("no heading source configured")
        return self.heading_source

    def zero_gyroscope(self) -> None:
        """
        Make the robot's current direction the new forward.
        """
        self._require_heading().zero()
        log_event(self.logger, "heading_zeroed", component="drivetrain")

    def get_gyroscope_rotation(self) -> float:
        """
        Heading in degrees, counter-clockwise positive.
        """
        return self._require_heading().current_heading()

    def to_dict(self) -> Dict[str, Any]:
        last = self._last_set
        return {
            "seq": self._seq,
            "command": dict(zip(("vx", "vy", "omega"), self.current_command().as_tuple())),
            "limits": self.limits.to_dict(),
            "offsets": self.geometry.as_tuple(),
            "last_command_set": None if last is None else last.to_dict(),
        }


__all__ = [
    "DrivetrainError",
    "DrivetrainConfigError",
    "HeadingUnavailableError",
    "SwerveDrivetrain",
]
