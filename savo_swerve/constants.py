# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/constants.py
-------------------------------------
Centralized package-wide constants for `savo_swerve`.

Notes
-----
- Dependency-free (no ROS imports).
- These are *code defaults* only. `config/swerve_drivetrain.yaml` and ROS
  parameters override them at startup.
- Module order everywhere in this package is (FL, FR, BL, BR).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final, Tuple


# =============================================================================
# Package / Identity
# =============================================================================
PACKAGE_NAME: Final[str] = "savo_swerve"
NODE_NAME_SWERVE_DRIVER: Final[str] = "swerve_driver_node"
ROBOT_NAME: Final[str] = "Robot Savo"
VERSION: Final[str] = "0.1.0"
SUPPORTED_ROS_DISTRO: Final[str] = "jazzy"


# =============================================================================
# Topic Names (code defaults)
# =============================================================================
TOPIC_CMD_VEL: Final[str] = "/cmd_vel"
TOPIC_ZERO_HEADING: Final[str] = "/savo_swerve/zero_heading"
TOPIC_HEADING_DEG: Final[str] = "/savo_swerve/heading_deg"


# =============================================================================
# Drive loop rates
# =============================================================================
DRIVE_LOOP_HZ_DEFAULT: Final[float] = 50.0
DRIVE_LOOP_HZ_MIN: Final[float] = 5.0
HEADING_PUBLISH_HZ_DEFAULT: Final[float] = 10.0


# =============================================================================
# Motor / gearing defaults (SDS MK4i L2 with NEO drive motors)
# =============================================================================
NEO_FREE_SPEED_RPM: Final[float] = 5880.0
FALCON_FREE_SPEED_RPM: Final[float] = 6380.0

MK4I_L2_DRIVE_REDUCTION: Final[float] = (14.0 / 50.0) * (27.0 / 17.0) * (15.0 / 45.0)
MK4I_WHEEL_DIAMETER_M: Final[float] = 0.10033

# Voltage delivered to the drive motors at full commanded speed.
MAX_VOLTAGE_DEFAULT: Final[float] = 12.0


# =============================================================================
# Chassis geometry defaults (meters)
# =============================================================================
# Left-to-right distance between module centers
TRACK_WIDTH_M_DEFAULT: Final[float] = 0.4699
# Front-to-back distance between module centers
WHEELBASE_M_DEFAULT: Final[float] = 0.4699


# =============================================================================
# Module hardware identity defaults
# (drive motor id, steer motor id, steer encoder id, steer offset rad)
# =============================================================================
MODULE_ORDER: Final[Tuple[str, str, str, str]] = ("FL", "FR", "BL", "BR")

FRONT_LEFT_MODULE_DEFAULT: Final[Tuple[int, int, int, float]] = (5, 6, 32, -math.radians(307.8))
FRONT_RIGHT_MODULE_DEFAULT: Final[Tuple[int, int, int, float]] = (2, 11, 34, -math.radians(301.3))
BACK_LEFT_MODULE_DEFAULT: Final[Tuple[int, int, int, float]] = (7, 8, 31, -math.radians(13.1))
BACK_RIGHT_MODULE_DEFAULT: Final[Tuple[int, int, int, float]] = (4, 3, 33, -math.radians(49.2))


# =============================================================================
# Structured defaults
# =============================================================================
@dataclass(frozen=True)
class SwerveDriverDefaults:
    node_name: str = NODE_NAME_SWERVE_DRIVER
    robot_name: str = ROBOT_NAME

    cmd_topic: str = TOPIC_CMD_VEL
    zero_heading_topic: str = TOPIC_ZERO_HEADING
    heading_topic: str = TOPIC_HEADING_DEG

    loop_hz: float = DRIVE_LOOP_HZ_DEFAULT
    heading_publish_hz: float = HEADING_PUBLISH_HZ_DEFAULT

    track_width_m: float = TRACK_WIDTH_M_DEFAULT
    wheelbase_m: float = WHEELBASE_M_DEFAULT
    motor_free_speed_rpm: float = NEO_FREE_SPEED_RPM
    drive_reduction: float = MK4I_L2_DRIVE_REDUCTION
    wheel_diameter_m: float = MK4I_WHEEL_DIAMETER_M
    max_voltage: float = MAX_VOLTAGE_DEFAULT

    def to_dict(self) -> dict:
        return {
            "node_name": self.node_name,
            "robot_name": self.robot_name,
            "topics": {
                "cmd_topic": self.cmd_topic,
                "zero_heading_topic": self.zero_heading_topic,
                "heading_topic": self.heading_topic,
            },
            "rates": {
                "loop_hz": self.loop_hz,
                "heading_publish_hz": self.heading_publish_hz,
            },
            "drivetrain": {
                "track_width_m": self.track_width_m,
                "wheelbase_m": self.wheelbase_m,
                "motor_free_speed_rpm": self.motor_free_speed_rpm,
                "drive_reduction": self.drive_reduction,
                "wheel_diameter_m": self.wheel_diameter_m,
                "max_voltage": self.max_voltage,
                "module_order": list(MODULE_ORDER),
            },
        }


DEFAULTS: Final[SwerveDriverDefaults] = SwerveDriverDefaults()


def get_swerve_driver_defaults() -> SwerveDriverDefaults:
    """Return immutable structured defaults for the swerve driver node."""
    return DEFAULTS


def get_startup_banner() -> str:
    """Identity line logged once when the driver node starts."""
    return f"{ROBOT_NAME} | {PACKAGE_NAME} {VERSION} (ROS 2 {SUPPORTED_ROS_DISTRO})"


__all__ = [
    "PACKAGE_NAME",
    "NODE_NAME_SWERVE_DRIVER",
    "ROBOT_NAME",
    "VERSION",
    "SUPPORTED_ROS_DISTRO",
    "TOPIC_CMD_VEL",
    "TOPIC_ZERO_HEADING",
    "TOPIC_HEADING_DEG",
    "DRIVE_LOOP_HZ_DEFAULT",
    "DRIVE_LOOP_HZ_MIN",
    "HEADING_PUBLISH_HZ_DEFAULT",
    "NEO_FREE_SPEED_RPM",
    "FALCON_FREE_SPEED_RPM",
    "MK4I_L2_DRIVE_REDUCTION",
    "MK4I_WHEEL_DIAMETER_M",
    "MAX_VOLTAGE_DEFAULT",
    "TRACK_WIDTH_M_DEFAULT",
    "WHEELBASE_M_DEFAULT",
    "MODULE_ORDER",
    "FRONT_LEFT_MODULE_DEFAULT",
    "FRONT_RIGHT_MODULE_DEFAULT",
    "BACK_LEFT_MODULE_DEFAULT",
    "BACK_RIGHT_MODULE_DEFAULT",
    "SwerveDriverDefaults",
    "DEFAULTS",
    "get_swerve_driver_defaults",
    "get_startup_banner",
]
