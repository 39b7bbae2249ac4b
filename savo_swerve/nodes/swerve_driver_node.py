#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/nodes/swerve_driver_node.py
----------------------------------------------------
ROS 2 Jazzy host node for the Robot Savo swerve drive loop.

Role in stack
-------------
Owns one `SwerveDrivetrain` and schedules it:

  /cmd_vel (teleop / nav)
     -> drive()            (any rate, last write wins)
  timer @ loop_hz
     -> tick()             (kinematics, desaturation, voltage, 4x module.set)

Inputs
------
- /cmd_vel                    (geometry_msgs/Twist)
- /savo_swerve/zero_heading   (std_msgs/Bool, True -> zero the heading)

Outputs
-------
- /savo_swerve/heading_deg    (std_msgs/Float32, CCW positive degrees)

Hardware
--------
Module and IMU drivers are external collaborators; this node wires the
dry-run stand-ins from `savo_swerve.drivers` so the loop runs anywhere.
Modules are stopped (zero voltage, held angle) on shutdown.
"""

from __future__ import annotations

import traceback
from typing import Optional

import rclpy
from rclpy.node import Node
from rclpy.qos import HistoryPolicy, QoSProfile, ReliabilityPolicy
from geometry_msgs.msg import Twist
from std_msgs.msg import Bool, Float32

from savo_swerve.constants import DEFAULTS, DRIVE_LOOP_HZ_MIN, NODE_NAME_SWERVE_DRIVER, get_startup_banner
from savo_swerve.drivetrain import SwerveDrivetrain
from savo_swerve.drivers import DryRunHeadingSensor, close_modules, make_dryrun_modules
from savo_swerve.heading import HeadingSource
from savo_swerve.kinematics import ChassisSpeeds, KinematicsValueError, describe_swerve_conventions
from savo_swerve.models import ConfigValidationError, DrivetrainConfig, LimitsValidationError
from savo_swerve.utils import ParamLoader, RateLimitedLogger, get_logger_adapter, log_exception


class SwerveDriverNode(Node):
    """
    Swerve drive loop host for Robot Savo.
    """

    def __init__(self) -> None:
        super().__init__(NODE_NAME_SWERVE_DRIVER)
        self.log = get_logger_adapter(self)
        self._rl = RateLimitedLogger(self.log, period_s=1.0)

        # ---------------------------------------------------------------------
        # Parameters
        # ---------------------------------------------------------------------
        pl = ParamLoader(self, component=NODE_NAME_SWERVE_DRIVER)
        self.cmd_topic = pl.get_str("cmd_topic", default=DEFAULTS.cmd_topic)
        self.zero_heading_topic = pl.get_str("zero_heading_topic", default=DEFAULTS.zero_heading_topic)
        self.heading_topic = pl.get_str("heading_topic", default=DEFAULTS.heading_topic)
        self.loop_hz = pl.get_float("loop_hz", default=DEFAULTS.loop_hz, lo=DRIVE_LOOP_HZ_MIN)
        self.heading_publish_hz = pl.get_float(
            "heading_publish_hz", default=DEFAULTS.heading_publish_hz, lo=0.0
        )
        self.magnetometer_calibrated = pl.get_bool("dryrun_magnetometer_calibrated", default=False)

        try:
            self.config = DrivetrainConfig.from_mapping(pl.load_drivetrain_params())
        except (ConfigValidationError, LimitsValidationError) as e:
            log_exception(self.log, e, message="Invalid drivetrain parameters", component=NODE_NAME_SWERVE_DRIVER)
            raise
        pl.log_loaded()

        # ---------------------------------------------------------------------
        # Drive loop (dry-run collaborators)
        # ---------------------------------------------------------------------
        self.modules = make_dryrun_modules(self.config)
        self.sensor = DryRunHeadingSensor(magnetometer_calibrated=self.magnetometer_calibrated)
        self.heading = HeadingSource(self.sensor, logger=self.log)
        self.drivetrain = SwerveDrivetrain(
            self.config,
            self.modules,
            heading_source=self.heading,
            logger=self.log,
        )
        self._tick_faults = 0

        # ---------------------------------------------------------------------
        # ROS wiring
        # ---------------------------------------------------------------------
        qos_cmd = QoSProfile(
            reliability=ReliabilityPolicy.RELIABLE,
            history=HistoryPolicy.KEEP_LAST,
            depth=10,
        )
        self.sub_cmd = self.create_subscription(Twist, self.cmd_topic, self._on_cmd_vel, qos_cmd)
        self.sub_zero = self.create_subscription(Bool, self.zero_heading_topic, self._on_zero_heading, qos_cmd)
        self.pub_heading = self.create_publisher(Float32, self.heading_topic, 10)

        self.exec_timer = self.create_timer(1.0 / self.loop_hz, self._exec_loop)
        self.heading_timer = None
        if self.heading_publish_hz > 0.0:
            self.heading_timer = self.create_timer(1.0 / self.heading_publish_hz, self._publish_heading)

        self.log.info(
            f"{get_startup_banner()} | {NODE_NAME_SWERVE_DRIVER} started | "
            f"cmd_topic={self.cmd_topic} loop_hz={self.loop_hz:.1f} "
            f"max_mps={self.drivetrain.limits.max_linear_speed_mps:.3f} "
            f"profile={self.config.profile_name}"
        )
        self.log.info(describe_swerve_conventions())

    # =========================================================================
    # Subscribers
    # =========================================================================
    def _on_cmd_vel(self, msg: Twist) -> None:
        speeds = ChassisSpeeds(
            vx=float(msg.linear.x),
            vy=float(msg.linear.y),
            omega=float(msg.angular.z),
        )
        try:
            self.drivetrain.drive(speeds)
        except KinematicsValueError as e:
            self._rl.warn("bad_cmd_vel", f"Rejected /cmd_vel: {e}")

    def _on_zero_heading(self, msg: Bool) -> None:
        if not bool(msg.data):
            return
        try:
            self.drivetrain.zero_gyroscope()
        except Exception as e:
            log_exception(self.log, e, message="zero_gyroscope failed", component=NODE_NAME_SWERVE_DRIVER)

    # =========================================================================
    # Timers
    # =========================================================================
    def _exec_loop(self) -> None:
        try:
            self.drivetrain.tick()
        except Exception:
            # Already logged by the drive loop; next cycle retries.
            self._tick_faults += 1

    def _publish_heading(self) -> None:
        try:
            heading = self.drivetrain.get_gyroscope_rotation()
        except Exception as e:
            self._rl.warn("heading_read", f"Heading read failed: {e}")
            return
        self.pub_heading.publish(Float32(data=float(heading)))

    # =========================================================================
    # Shutdown
    # =========================================================================
    def destroy_node(self) -> bool:
        try:
            self.log.info(f"Shutting down {NODE_NAME_SWERVE_DRIVER}: stopping modules...")
            try:
                close_modules(self.modules)
            except Exception as e:
                self.log.warn(f"Module close failed: {e}")
        finally:
            return super().destroy_node()


# =============================================================================
# Entry point
# =============================================================================
def main(args=None) -> None:
    rclpy.init(args=args)
    node: Optional[SwerveDriverNode] = None
    try:
        node = SwerveDriverNode()
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"[{NODE_NAME_SWERVE_DRIVER}] Fatal error: {e}")
        traceback.print_exc()
    finally:
        if node is not None:
            node.destroy_node()
        if rclpy.ok():
            rclpy.shutdown()


if __name__ == "__main__":
    main()
