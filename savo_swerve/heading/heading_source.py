#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/heading/heading_source.py
--------------------------------------------------
Counter-clockwise-positive robot heading from a NavX-style IMU.

Two computation modes, picked on every read from the sensor's live
calibration state (calibration can change while running):

- FUSED            : magnetometer calibrated -> sensor fused heading (deg),
                     already CCW positive
- RAW_YAW_FALLBACK : otherwise -> 360 - yaw, turning the sensor's native
                     clockwise-positive yaw into CCW positive

Nothing is cached; every call reads the sensor. Sensor failures propagate
to the caller unchanged.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..drivers.interfaces import HeadingSensor
from ..utils.logging import LoggerAdapter, get_logger_adapter, log_event


class HeadingMode(str, Enum):
    FUSED = "fused"
    RAW_YAW_FALLBACK = "raw_yaw_fallback"


@dataclass(frozen=True)
class HeadingReading:
    degrees: float
    mode: HeadingMode

    @property
    def radians(self) -> float:
        return math.radians(self.degrees)

    def to_dict(self) -> Dict[str, Any]:
        return {"degrees": self.degrees, "mode": self.mode.value}


def gyro_only_heading_deg(raw_yaw_deg: float) -> float:
    """
    Convert native clockwise-positive yaw to counter-clockwise-positive degrees.
    """
    return 360.0 - float(raw_yaw_deg)


class HeadingSource:
    """
    Heading query surface for any collaborator that needs orientation.
    """

    def __init__(self, sensor: HeadingSensor, *, logger: Optional[LoggerAdapter] = None) -> None:
        self.sensor = sensor
        self.logger = logger if logger is not None else get_logger_adapter(name="savo_swerve.heading")

    def mode(self) -> HeadingMode:
        if self.sensor.is_magnetometer_calibrated():
            return HeadingMode.FUSED
        return HeadingMode.RAW_YAW_FALLBACK

    def read(self) -> HeadingReading:
        mode = self.mode()
        if mode is HeadingMode.FUSED:
            return HeadingReading(float(self.sensor.get_fused_heading()), mode)
        return HeadingReading(gyro_only_heading_deg(self.sensor.get_yaw()), mode)

    def current_heading(self) -> float:
        """
        Heading in degrees, counter-clockwise positive.
        """
        return self.read().degrees

    def current_heading_rad(self) -> float:
        return self.read().radians

    def gyro_only_heading(self) -> float:
        """
        Gyro-only heading regardless of calibration state. Handy when
        checking the magnetometer against the gyro.
        """
        return gyro_only_heading_deg(self.sensor.get_yaw())

    def log_gyro_heading(self) -> float:
        heading = self.gyro_only_heading()
        log_event(self.logger, "gyro_heading", level="DEBUG", details={"deg": f"{heading:.2f}"})
        return heading

    def zero(self) -> None:
        """
        Make the current direction the new forward. Only touches the sensor.
        """
        self.sensor.zero_yaw()


__all__ = [
    "HeadingMode",
    "HeadingReading",
    "HeadingSource",
    "gyro_only_heading_deg",
]
