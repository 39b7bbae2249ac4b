# -*- coding: utf-8 -*-
"""
Robot SAVO — savo_swerve/nodes/__init__.py
------------------------------------------
ROS 2 node entry points for `savo_swerve`.

Node modules import rclpy at import time; this package intentionally does
not import them eagerly so non-ROS code can import `savo_swerve.nodes`.
"""

__all__ = ["swerve_driver_node"]
