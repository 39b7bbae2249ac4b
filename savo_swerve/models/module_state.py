#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/models/module_state.py
-----------------------------------------------
Per-cycle swerve module command models.

- `ModuleState`      : kinematics output (speed m/s, angle rad)
- `ModuleCommand`    : actuator input for one module (voltage, angle rad)
- `ModuleCommandSet` : all four module commands of one control cycle,
                       in locked order (FL, FR, BL, BR)

Pure Python, no ROS imports. Instances are created fresh every cycle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

from ..kinematics.conventions import (
    MODULE_ORDER,
    NUM_MODULES,
    ModuleName,
    ModuleState,
    module_index,
)


class ModuleCommandValidationError(ValueError):
    """Raised when a module command set is malformed."""


@dataclass(frozen=True)
class ModuleCommand:
    module: ModuleName
    voltage: float
    angle_rad: float

    def as_pair(self) -> Tuple[float, float]:
        return (self.voltage, self.angle_rad)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "module": self.module.value,
            "voltage": float(self.voltage),
            "angle_rad": float(self.angle_rad),
        }


@dataclass(frozen=True)
class ModuleCommandSet:
    """
    The four module commands produced by one drive-loop tick.
    """
    seq: int
    commands: Tuple[ModuleCommand, ModuleCommand, ModuleCommand, ModuleCommand]

    def __post_init__(self) -> None:
        if len(self.commands) != NUM_MODULES:
            raise ModuleCommandValidationError(
                f"expected {NUM_MODULES} module commands, got {len(self.commands)}"
            )
        names = tuple(c.module for c in self.commands)
        if names != MODULE_ORDER:
            raise ModuleCommandValidationError(
                f"module commands out of order: {[n.value for n in names]}"
            )

    @classmethod
    def from_pairs(cls, seq: int, pairs: Sequence[Tuple[float, float]]) -> "ModuleCommandSet":
        if len(pairs) != NUM_MODULES:
            raise ModuleCommandValidationError(
                f"expected {NUM_MODULES} (voltage, angle) pairs, got {len(pairs)}"
            )
        return cls(
            seq=int(seq),
            commands=tuple(
                ModuleCommand(module=name, voltage=float(v), angle_rad=float(a))
                for name, (v, a) in zip(MODULE_ORDER, pairs)
            ),
        )

    def for_module(self, name) -> ModuleCommand:
        return self.commands[module_index(name)]

    def as_pairs(self) -> Tuple[Tuple[float, float], ...]:
        return tuple(c.as_pair() for c in self.commands)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seq": self.seq,
            "commands": {c.module.value: c.to_dict() for c in self.commands},
        }


__all__ = [
    "ModuleState",
    "ModuleCommandValidationError",
    "ModuleCommand",
    "ModuleCommandSet",
]
