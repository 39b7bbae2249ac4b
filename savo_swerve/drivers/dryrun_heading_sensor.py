#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/drivers/dryrun_heading_sensor.py
---------------------------------------------------------
Software-only NavX-style heading sensor.

Mirrors the sensor conventions the heading source expects:
- get_yaw()            : degrees in [-180, 180), clockwise positive, relative
                         to the last zero
- get_fused_heading()  : degrees, counter-clockwise positive, [0, 360)
- is_magnetometer_calibrated()
- zero_yaw()

Values are set directly by tests or by a simulator.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..kinematics.conventions import wrap_degrees_180
from .driver_exceptions import ActuatorErrorContext, HeadingSensorError


class DryRunHeadingSensor:
    def __init__(
        self,
        *,
        yaw_deg: float = 0.0,
        fused_heading_deg: float = 0.0,
        magnetometer_calibrated: bool = False,
    ) -> None:
        self._raw_yaw_deg = float(yaw_deg)
        self._yaw_ref_deg = 0.0
        self.fused_heading_deg = float(fused_heading_deg)
        self.magnetometer_calibrated = bool(magnetometer_calibrated)
        self.zero_count = 0
        self._fault: Optional[str] = None

    # -------------------------------------------------------------------------
    # Sensor API
    # -------------------------------------------------------------------------
    def zero_yaw(self) -> None:
        self._check("zero_yaw")
        self._yaw_ref_deg = self._raw_yaw_deg
        self.zero_count += 1

    def is_magnetometer_calibrated(self) -> bool:
        self._check("is_magnetometer_calibrated")
        return self.magnetometer_calibrated

    def get_fused_heading(self) -> float:
        self._check("get_fused_heading")
        return self.fused_heading_deg

    def get_yaw(self) -> float:
        self._check("get_yaw")
        return wrap_degrees_180(self._raw_yaw_deg - self._yaw_ref_deg)

    # -------------------------------------------------------------------------
    # Simulation helpers
    # -------------------------------------------------------------------------
    def set_raw_yaw(self, yaw_deg: float) -> None:
        """Set the absolute (un-zeroed) native yaw, clockwise positive."""
        self._raw_yaw_deg = float(yaw_deg)

    def set_fault(self, message: Optional[str]) -> None:
        """Make every subsequent call raise HeadingSensorError (None clears)."""
        self._fault = message

    def _check(self, operation: str) -> None:
        if self._fault is not None:
            raise HeadingSensorError(
                self._fault,
                context=ActuatorErrorContext(driver="DryRunHeadingSensor", operation=operation),
            )

    def get_state_dict(self) -> Dict[str, object]:
        return {
            "raw_yaw_deg": self._raw_yaw_deg,
            "yaw_ref_deg": self._yaw_ref_deg,
            "fused_heading_deg": self.fused_heading_deg,
            "magnetometer_calibrated": self.magnetometer_calibrated,
            "zero_count": self.zero_count,
            "fault": self._fault,
        }


__all__ = ["DryRunHeadingSensor"]
