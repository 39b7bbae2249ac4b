# -*- coding: utf-8 -*-
"""
Shared fixtures for savo_swerve tests (no ROS required).
"""

from __future__ import annotations

import pytest

from savo_swerve.drivers import DryRunHeadingSensor, make_dryrun_modules
from savo_swerve.heading import HeadingSource
from savo_swerve.models import make_default_drivetrain_config
from savo_swerve.utils import LoggerAdapter


class RecordingLogger:
    """Stands in for an rclpy / stdlib logger and keeps every line."""

    def __init__(self):
        self.records = []

    def debug(self, msg):
        self.records.append(("DEBUG", msg))

    def info(self, msg):
        self.records.append(("INFO", msg))

    def warning(self, msg):
        self.records.append(("WARN", msg))

    def error(self, msg):
        self.records.append(("ERROR", msg))

    def messages(self, level=None):
        return [m for lvl, m in self.records if level is None or lvl == level]


@pytest.fixture
def recorder():
    return RecordingLogger()


@pytest.fixture
def logger(recorder):
    return LoggerAdapter(target=recorder, name="test")


@pytest.fixture
def config():
    return make_default_drivetrain_config()


@pytest.fixture
def modules(config):
    return make_dryrun_modules(config)


@pytest.fixture
def sensor():
    return DryRunHeadingSensor()


@pytest.fixture
def heading(sensor, logger):
    return HeadingSource(sensor, logger=logger)
