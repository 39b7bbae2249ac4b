#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/drivers/dryrun_module.py
-------------------------------------------------
Software-only swerve module for Robot Savo (ROS 2 Jazzy / non-ROS tools).

Purpose
- Stand-in for the real CAN swerve module driver (drive + steer motors,
  steer encoder)
- Lets the drive loop, kinematics and node wiring run without hardware
- Records every command for diagnostics and unit tests

Typical use
-----------
from savo_swerve.drivers.dryrun_module import DryRunSwerveModule

fl = DryRunSwerveModule("FL", max_voltage=12.0)
fl.set(6.0, 0.0)
fl.close()
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from ..kinematics.conventions import MODULE_ORDER, ModuleName, normalize_module_name
from ..models.drivetrain_config import DrivetrainConfig, ModuleHardwareConfig
from .driver_exceptions import (
    ActuatorClosedError,
    ActuatorConfigError,
    ActuatorErrorContext,
    wrap_actuator_error,
)


@dataclass(frozen=True)
class DryRunModuleCommand:
    """
    Snapshot of one applied module command.
    """
    timestamp_s: float
    voltage: float
    angle_rad: float
    source: str = "set"

    def as_pair(self) -> Tuple[float, float]:
        return (self.voltage, self.angle_rad)


class DryRunSwerveModule:
    """
    Software-only swerve module.

    API compatibility target (real module drivers)
    ----------------------------------------------
    - set(voltage, angle_rad)
    - stop()
    - close()

    Test helpers
    ------------
    - fail_next(exc)   : raise `exc` on the next set() call
    - get_history()
    - get_last_command()
    """

    def __init__(
        self,
        name,
        *,
        hardware: Optional[ModuleHardwareConfig] = None,
        max_voltage: float = 12.0,
        max_history: int = 1000,
    ) -> None:
        self.name = normalize_module_name(name)
        self.hardware = hardware

        try:
            self.max_voltage = float(max_voltage)
        except (TypeError, ValueError) as e:
            raise ActuatorConfigError(f"max_voltage must be numeric, got {max_voltage!r}") from e
        if not math.isfinite(self.max_voltage) or self.max_voltage <= 0.0:
            raise ActuatorConfigError(f"max_voltage must be > 0, got {max_voltage!r}")
        if int(max_history) < 1:
            raise ActuatorConfigError(f"max_history must be >= 1, got {max_history!r}")
        self.max_history = int(max_history)

        self._is_open = True
        self._history: List[DryRunModuleCommand] = []
        self._last: Tuple[float, float] = (0.0, 0.0)
        self._pending_fault: Optional[BaseException] = None
        self.command_count = 0

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _context(self, operation: str, value=None) -> ActuatorErrorContext:
        hw = self.hardware
        return ActuatorErrorContext(
            driver="DryRunSwerveModule",
            module=self.name.value,
            operation=operation,
            drive_motor_id=None if hw is None else hw.drive_motor_id,
            steer_motor_id=None if hw is None else hw.steer_motor_id,
            steer_encoder_id=None if hw is None else hw.steer_encoder_id,
            value=value,
        )

    def _ensure_open(self, operation: str) -> None:
        if not self._is_open:
            raise ActuatorClosedError(f"{self.name.value} module is closed", context=self._context(operation))

    def _record(self, voltage: float, angle_rad: float, source: str) -> None:
        self._last = (voltage, angle_rad)
        self.command_count += 1
        self._history.append(DryRunModuleCommand(time.time(), voltage, angle_rad, source))
        if len(self._history) > self.max_history:
            self._history = self._history[-self.max_history:]

    # -------------------------------------------------------------------------
    # Core API
    # -------------------------------------------------------------------------
    def set(self, voltage: float, angle_rad: float) -> None:
        """
        Apply a drive voltage and steer angle. Voltage is clamped to ±max_voltage.
        """
        self._ensure_open("set")

        if self._pending_fault is not None:
            fault, self._pending_fault = self._pending_fault, None
            raise fault

        try:
            v = float(voltage)
            a = float(angle_rad)
        except (TypeError, ValueError) as e:
            raise wrap_actuator_error(
                e,
                message="module command must be numeric",
                driver="DryRunSwerveModule",
                module=self.name.value,
                operation="set",
                value=repr((voltage, angle_rad)),
            ) from e

        v = max(-self.max_voltage, min(self.max_voltage, v))
        self._record(v, a, "set")

    def stop(self) -> None:
        """
        Zero the drive voltage, keep the steer angle.
        """
        self._ensure_open("stop")
        self._record(0.0, self._last[1], "stop")

    def close(self) -> None:
        if not self._is_open:
            return
        self.stop()
        self._is_open = False

    @property
    def is_open(self) -> bool:
        return self._is_open

    # -------------------------------------------------------------------------
    # Test / diagnostics helpers
    # -------------------------------------------------------------------------
    def fail_next(self, exc: BaseException) -> None:
        self._pending_fault = exc

    def get_history(self) -> List[DryRunModuleCommand]:
        return list(self._history)

    def get_last_command(self) -> Tuple[float, float]:
        return self._last

    def get_state_dict(self) -> Dict[str, object]:
        return {
            "name": self.name.value,
            "is_open": self._is_open,
            "command_count": self.command_count,
            "last_voltage": self._last[0],
            "last_angle_rad": self._last[1],
            "max_voltage": self.max_voltage,
            "hardware": None if self.hardware is None else self.hardware.to_dict(),
        }

    def summary(self) -> str:
        v, a = self._last
        return (
            f"DryRunSwerveModule({self.name.value}, open={self._is_open}, "
            f"cmds={self.command_count}, last=[V={v:+.2f}, angle={a:+.3f}rad])"
        )


def make_dryrun_modules(config: DrivetrainConfig) -> Dict[ModuleName, DryRunSwerveModule]:
    """
    Build four dry-run modules from a drivetrain config, keyed by module name.
    """
    config.validate()
    return {
        name: DryRunSwerveModule(
            name,
            hardware=config.modules[name],
            max_voltage=config.max_voltage,
        )
        for name in MODULE_ORDER
    }


def close_modules(modules: Mapping[ModuleName, DryRunSwerveModule]) -> None:
    for name in MODULE_ORDER:
        module = modules.get(name)
        if module is not None:
            module.close()


__all__ = [
    "DryRunModuleCommand",
    "DryRunSwerveModule",
    "make_dryrun_modules",
    "close_modules",
]
