# -*- coding: utf-8 -*-
"""
Robot SAVO — savo_swerve/heading/__init__.py
--------------------------------------------
Heading source exports.
"""

from .heading_source import HeadingMode, HeadingReading, HeadingSource, gyro_only_heading_deg

__all__ = [
    "HeadingMode",
    "HeadingReading",
    "HeadingSource",
    "gyro_only_heading_deg",
]
