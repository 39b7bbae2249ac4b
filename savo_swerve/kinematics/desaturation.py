#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/kinematics/desaturation.py
---------------------------------------------------
Wheel-speed desaturation for the Robot Savo swerve base.

If any module is asked to go faster than the platform can, all four speeds
are scaled by the same factor `max / peak`. Angles are untouched, so the
ratios between modules (and the net translation + rotation) are kept.
A per-wheel clamp would only cut the fastest wheels and bend the path.

When the peak is already within the limit the input is returned as-is.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

from .conventions import KinematicsValueError, ModuleState


def _validate_max_speed(max_speed: float) -> float:
    try:
        m = float(max_speed)
    except (TypeError, ValueError) as e:
        raise KinematicsValueError(f"max speed must be numeric, got {max_speed!r}") from e
    if not math.isfinite(m) or m <= 0.0:
        raise KinematicsValueError(f"max speed must be finite and > 0, got {max_speed!r}")
    return m


def peak_speed(states: Sequence[ModuleState]) -> float:
    """
    Largest absolute module speed (0.0 for an empty sequence).
    """
    return max((abs(s.speed_mps) for s in states), default=0.0)


def desaturate_module_speeds(
    states: Sequence[ModuleState],
    max_linear_speed: float,
) -> Tuple[ModuleState, ...]:
    """
    Uniformly rescale module speeds when any of them exceeds `max_linear_speed`.

    Returns:
        a tuple of ModuleState in the same order; the very same objects when
        no scaling was needed
    """
    m = _validate_max_speed(max_linear_speed)
    peak = peak_speed(states)
    if peak <= m:
        return tuple(states)
    factor = m / peak
    return tuple(s.scaled(factor) for s in states)


__all__ = [
    "peak_speed",
    "desaturate_module_speeds",
]
