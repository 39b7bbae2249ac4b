#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/utils/param_loader.py
----------------------------------------------
ROS 2 parameter loading helpers for `savo_swerve`.

- idempotent declaration before every read
- typed reads (bool/int/float/str) with optional bounds
- a record of every loaded value, logged once at startup
- `load_drivetrain_params()` gathers everything `DrivetrainConfig` needs

Works with node=None (tests, dry-run tools): every read returns its default.

Usage
-----
pl = ParamLoader(self, component="swerve_driver_node")
loop_hz = pl.get_float("loop_hz", default=50.0, lo=5.0)
config = DrivetrainConfig.from_mapping(pl.load_drivetrain_params())
pl.log_loaded()
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..constants import DEFAULTS
from ..kinematics.conventions import MODULE_ORDER
from ..models.drivetrain_config import make_default_drivetrain_config
from .logging import get_logger_adapter


# =============================================================================
# Parsing helpers
# =============================================================================
def _clamp_num(value, lo, hi):
    if lo is not None and value < lo:
        value = lo
    if hi is not None and value > hi:
        value = hi
    return value


def _to_bool(value: Any, default: bool = False) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return bool(default)
    if isinstance(value, (int, float)):
        return bool(value)
    text = str(value).strip().lower()
    if text in ("1", "true", "t", "yes", "y", "on"):
        return True
    if text in ("0", "false", "f", "no", "n", "off"):
        return False
    return bool(default)


def _to_int(value: Any, default: int = 0) -> int:
    if value is None:
        return int(default)
    if isinstance(value, (bool, int)):
        return int(value)
    if isinstance(value, float):
        return int(value)
    text = str(value).strip()
    try:
        return int(text, 0)
    except ValueError:
        try:
            return int(float(text))
        except ValueError:
            return int(default)


def _to_float(value: Any, default: float = 0.0) -> float:
    if value is None:
        return float(default)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return float(default)


# =============================================================================
# Records
# =============================================================================
@dataclass
class ParamRecord:
    name: str
    declared_default: Any
    loaded_value: Any
    kind: str
    clamped: bool = False
    notes: str = ""


@dataclass
class ParamLoadSummary:
    component: str = "savo_swerve"
    records: Dict[str, ParamRecord] = field(default_factory=dict)

    def values_dict(self) -> Dict[str, Any]:
        return {k: v.loaded_value for k, v in self.records.items()}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "component": self.component,
            "count": len(self.records),
            "params": {
                k: {
                    "declared_default": v.declared_default,
                    "loaded_value": v.loaded_value,
                    "kind": v.kind,
                    "clamped": v.clamped,
                    "notes": v.notes,
                }
                for k, v in self.records.items()
            },
        }


# =============================================================================
# ParamLoader
# =============================================================================
class ParamLoader:
    """
    Parameter loader wrapper for ROS2 Nodes.
    """

    def __init__(self, node: Optional[Any], *, component: str = "savo_swerve") -> None:
        self.node = node
        self.component = component
        self.logger = get_logger_adapter(node, name=component)
        self.summary = ParamLoadSummary(component=component)

    def _declare_if_needed(self, name: str, default: Any) -> None:
        if self.node is None:
            return
        if self.node.has_parameter(name):
            return
        self.node.declare_parameter(name, default)

    def _read_raw(self, name: str, default: Any) -> Any:
        if self.node is None:
            return default
        value = self.node.get_parameter(name).value
        return default if value is None else value

    def _record(self, name: str, default: Any, value: Any, kind: str, *, clamped: bool = False, notes: str = "") -> None:
        self.summary.records[name] = ParamRecord(
            name=name,
            declared_default=default,
            loaded_value=value,
            kind=kind,
            clamped=clamped,
            notes=notes,
        )

    # -------------------------------------------------------------------------
    # Typed getters
    # -------------------------------------------------------------------------
    def get_bool(self, name: str, *, default: bool = False) -> bool:
        self._declare_if_needed(name, default)
        val = _to_bool(self._read_raw(name, default), default=default)
        self._record(name, default, val, "bool")
        return val

    def get_int(self, name: str, *, default: int = 0, lo: Optional[int] = None, hi: Optional[int] = None) -> int:
        self._declare_if_needed(name, default)
        before = _to_int(self._read_raw(name, default), default=default)
        val = int(_clamp_num(before, lo, hi))
        notes = f"range=[{lo},{hi}]" if (lo is not None or hi is not None) else ""
        self._record(name, default, val, "int", clamped=(val != before), notes=notes)
        return val

    def get_float(
        self,
        name: str,
        *,
        default: float = 0.0,
        lo: Optional[float] = None,
        hi: Optional[float] = None,
    ) -> float:
        self._declare_if_needed(name, float(default))
        before = _to_float(self._read_raw(name, default), default=default)
        val = float(_clamp_num(before, lo, hi))
        notes = f"range=[{lo},{hi}]" if (lo is not None or hi is not None) else ""
        self._record(name, default, val, "float", clamped=(val != before), notes=notes)
        return val

    def get_str(self, name: str, *, default: str = "") -> str:
        self._declare_if_needed(name, default)
        raw = self._read_raw(name, default)
        val = str(default) if raw is None else str(raw)
        self._record(name, default, val, "str")
        return val

    # -------------------------------------------------------------------------
    # Grouped loaders
    # -------------------------------------------------------------------------
    def load_drivetrain_params(self) -> Dict[str, Any]:
        """
        Read geometry, gearing and per-module identity parameters.

        Geometry/gearing values are not clamped here; `DrivetrainConfig`
        rejects bad values at startup.

        Module parameters use dotted names, matching nested YAML:
            modules.FL.drive_motor_id, modules.FL.steer_offset_deg, ...
        """
        base = make_default_drivetrain_config()
        out: Dict[str, Any] = {
            "profile_name": self.get_str("profile_name", default=base.profile_name),
            "track_width_m": self.get_float("track_width_m", default=DEFAULTS.track_width_m),
            "wheelbase_m": self.get_float("wheelbase_m", default=DEFAULTS.wheelbase_m),
            "motor_free_speed_rpm": self.get_float(
                "motor_free_speed_rpm", default=DEFAULTS.motor_free_speed_rpm
            ),
            "drive_reduction": self.get_float("drive_reduction", default=DEFAULTS.drive_reduction),
            "wheel_diameter_m": self.get_float("wheel_diameter_m", default=DEFAULTS.wheel_diameter_m),
            "max_voltage": self.get_float("max_voltage", default=DEFAULTS.max_voltage),
            "modules": {},
        }
        for name in MODULE_ORDER:
            hw = base.modules[name]
            prefix = f"modules.{name.value}"
            out["modules"][name.value] = {
                "drive_motor_id": self.get_int(f"{prefix}.drive_motor_id", default=hw.drive_motor_id),
                "steer_motor_id": self.get_int(f"{prefix}.steer_motor_id", default=hw.steer_motor_id),
                "steer_encoder_id": self.get_int(f"{prefix}.steer_encoder_id", default=hw.steer_encoder_id),
                "steer_offset_deg": self.get_float(
                    f"{prefix}.steer_offset_deg",
                    default=round(math.degrees(hw.steer_offset_rad), 6),
                ),
            }
        return out

    # -------------------------------------------------------------------------
    # Logging / export helpers
    # -------------------------------------------------------------------------
    def values_dict(self) -> Dict[str, Any]:
        return self.summary.values_dict()

    def log_loaded(self, *, include_values: bool = True) -> None:
        comp = self.component
        self.logger.info(f"[{comp}] Loaded {len(self.summary.records)} parameters")
        if not include_values:
            return
        for name in sorted(self.summary.records):
            rec = self.summary.records[name]
            flags = [f for f in ("clamped" if rec.clamped else "", rec.notes) if f]
            suffix = f" ({', '.join(flags)})" if flags else ""
            self.logger.info(f"[{comp}]   {name} = {rec.loaded_value!r} [{rec.kind}]{suffix}")


__all__ = [
    "ParamRecord",
    "ParamLoadSummary",
    "ParamLoader",
]
