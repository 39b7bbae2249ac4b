#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — setup.py (ROS 2 Jazzy, savo_swerve)
------------------------------------------------
Purpose:
- Package the Python modules under `savo_swerve/`
- Install launch/ and config/ into the package share directory when built
  inside a colcon workspace

Notes
-----
`rclpy`, `geometry_msgs`, `std_msgs` and `launch*` come from the ROS 2
distribution and are only imported by `savo_swerve.nodes` and `launch/`.
Everything else (kinematics, models, heading, drivers, drivetrain) is
plain Python and can be installed with `pip install -e .` for tests.
"""

from glob import glob

from setuptools import find_packages, setup

package_name = "savo_swerve"

setup(
    name=package_name,
    version="0.1.0",
    packages=find_packages(exclude=("test", "test.*")),
    include_package_data=True,
    data_files=[
        # ament index resource (required for ROS 2 package discovery)
        ("share/ament_index/resource_index/packages", [f"resource/{package_name}"]),
        (f"share/{package_name}/launch", glob("launch/*.launch.py")),
        (f"share/{package_name}/config", glob("config/*.yaml")),
    ],
    install_requires=[
        "setuptools",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False,
    maintainer="Ahnaf Tahmid",
    maintainer_email="tahmidahnaf998@gmail.com",
    description=(
        "Robot SAVO swerve drivetrain motion core "
        "(module geometry, swerve inverse kinematics, wheel-speed desaturation, "
        "NavX-style heading source, periodic drive loop) for ROS 2 Jazzy."
    ),
    license="Proprietary",
    tests_require=["pytest"],
    entry_points={
        "console_scripts": [
            "swerve_driver_node = savo_swerve.nodes.swerve_driver_node:main",
        ],
    },
)
