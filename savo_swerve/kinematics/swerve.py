#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/kinematics/swerve.py
---------------------------------------------
Swerve inverse kinematics for Robot Savo (ROS 2 Jazzy).

Math/utility only (no ROS imports, no hardware imports).

For a module at offset (x, y) and a chassis command (vx, vy, omega):

    v_module = (vx - omega * y,  vy + omega * x)
    speed    = |v_module|
    angle    = atan2(v_module.y, v_module.x)

Output order is always (FL, FR, BL, BR).

Stationary modules
- atan2(0, 0) carries no direction. When a module's vector is exactly zero
  the angle holds the previous angle for that module, or 0.0 when there is
  none, so idle wheels do not snap back to forward.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

from .conventions import (
    NUM_MODULES,
    ChassisSpeeds,
    KinematicsValueError,
    ModuleState,
)
from .geometry import ModuleGeometry

ModuleStates = Tuple[ModuleState, ModuleState, ModuleState, ModuleState]


def module_vectors(
    speeds: ChassisSpeeds,
    geometry: ModuleGeometry,
) -> Tuple[Tuple[float, float], ...]:
    """
    Per-module velocity vectors (vx_i, vy_i) in the chassis frame.
    """
    if not isinstance(speeds, ChassisSpeeds):
        raise KinematicsValueError(f"speeds must be ChassisSpeeds, got {type(speeds).__name__}")
    speeds.validate()

    vx, vy, omega = speeds.vx, speeds.vy, speeds.omega
    return tuple(
        (vx - omega * off.y, vy + omega * off.x)
        for off in geometry.offsets
    )


def to_module_states(
    speeds: ChassisSpeeds,
    geometry: ModuleGeometry,
    previous_angles: Optional[Sequence[float]] = None,
) -> ModuleStates:
    """
    Convert a chassis command into four module states (FL, FR, BL, BR).

    Args:
        speeds: body-frame command
        geometry: module offsets
        previous_angles: last commanded angle per module, used only for
            modules whose vector is exactly zero

    Returns:
        tuple of four ModuleState
    """
    if previous_angles is not None and len(previous_angles) != NUM_MODULES:
        raise KinematicsValueError(
            f"previous_angles must have {NUM_MODULES} entries, got {len(previous_angles)}"
        )

    states = []
    for i, (mx, my) in enumerate(module_vectors(speeds, geometry)):
        if mx == 0.0 and my == 0.0:
            held = 0.0 if previous_angles is None else float(previous_angles[i])
            states.append(ModuleState(speed_mps=0.0, angle_rad=held))
            continue
        states.append(ModuleState(speed_mps=math.hypot(mx, my), angle_rad=math.atan2(my, mx)))
    return tuple(states)  # type: ignore[return-value]


class SwerveKinematics:
    """
    Stateful wrapper around `to_module_states()`.

    Remembers the last emitted angle per module so stationary modules hold
    their heading between cycles.
    """

    def __init__(self, geometry: ModuleGeometry) -> None:
        self.geometry = geometry
        self._last_angles: Tuple[float, ...] = (0.0,) * NUM_MODULES

    @property
    def last_angles(self) -> Tuple[float, ...]:
        return self._last_angles

    def to_module_states(self, speeds: ChassisSpeeds) -> ModuleStates:
        states = to_module_states(speeds, self.geometry, self._last_angles)
        self._last_angles = tuple(s.angle_rad for s in states)
        return states

    def reset_angles(self) -> None:
        self._last_angles = (0.0,) * NUM_MODULES


__all__ = [
    "ModuleStates",
    "module_vectors",
    "to_module_states",
    "SwerveKinematics",
]
