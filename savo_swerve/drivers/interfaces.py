#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/drivers/interfaces.py
----------------------------------------------
Collaborator interfaces consumed by the swerve motion core.

The core never constructs real hardware. It receives already-built handles
that satisfy these protocols (real CAN drivers, or the dry-run stand-ins in
this package).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SwerveModuleActuator(Protocol):
    """
    One driven-and-steered wheel module.

    set(voltage, angle_rad)
        voltage   : drive motor voltage, signed
        angle_rad : absolute wheel heading in the chassis frame
    """

    def set(self, voltage: float, angle_rad: float) -> None:
        ...


@runtime_checkable
class HeadingSensor(Protocol):
    """
    NavX-style IMU.

    get_yaw() uses the sensor's native convention (clockwise positive);
    get_fused_heading() is already counter-clockwise positive, in degrees.
    """

    def zero_yaw(self) -> None:
        ...

    def is_magnetometer_calibrated(self) -> bool:
        ...

    def get_fused_heading(self) -> float:
        ...

    def get_yaw(self) -> float:
        ...


__all__ = [
    "SwerveModuleActuator",
    "HeadingSensor",
]
