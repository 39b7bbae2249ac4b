#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — Swerve Bringup Launch (savo_swerve)
------------------------------------------------
Starts `swerve_driver_node` with the drivetrain profile YAML.

Recommended usage
-----------------
ros2 launch savo_swerve swerve_bringup.launch.py

ros2 launch savo_swerve swerve_bringup.launch.py loop_hz:=100.0

ros2 launch savo_swerve swerve_bringup.launch.py config_path:=/path/to/robot.yaml
"""

from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration, PathJoinSubstitution, PythonExpression
from launch_ros.actions import Node
from launch_ros.parameter_descriptions import ParameterValue
from launch_ros.substitutions import FindPackageShare


def generate_launch_description() -> LaunchDescription:
    pkg_share = FindPackageShare("savo_swerve")

    # -------------------------------------------------------------------------
    # Launch arguments
    # -------------------------------------------------------------------------
    config_path = LaunchConfiguration("config_path")
    loop_hz = LaunchConfiguration("loop_hz")
    output = LaunchConfiguration("output")
    log_level = LaunchConfiguration("log_level")

    default_yaml = PathJoinSubstitution([pkg_share, "config", "swerve_drivetrain.yaml"])

    # Empty config_path -> packaged default profile
    effective_yaml = PythonExpression(
        ["'", config_path, "' if '", config_path, "' != '' else '", default_yaml, "'"]
    )

    swerve_driver_node = Node(
        package="savo_swerve",
        executable="swerve_driver_node",
        name="swerve_driver_node",
        output=output,
        parameters=[
            effective_yaml,
            {"loop_hz": ParameterValue(loop_hz, value_type=float)},
        ],
        arguments=["--ros-args", "--log-level", log_level],
    )

    return LaunchDescription(
        [
            DeclareLaunchArgument(
                "config_path",
                default_value="",
                description="Drivetrain YAML; empty uses config/swerve_drivetrain.yaml",
            ),
            DeclareLaunchArgument("loop_hz", default_value="50.0", description="Drive loop rate (Hz)"),
            DeclareLaunchArgument("output", default_value="screen"),
            DeclareLaunchArgument("log_level", default_value="info"),
            swerve_driver_node,
        ]
    )
