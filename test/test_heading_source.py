# -*- coding: utf-8 -*-
import math

import pytest

from savo_swerve.drivers import DryRunHeadingSensor, HeadingSensorError
from savo_swerve.heading import HeadingMode, HeadingSource, gyro_only_heading_deg


class CountingSensor:
    def __init__(self, calibrated, fused=0.0, yaw=0.0):
        self.calibrated = calibrated
        self.fused = fused
        self.yaw = yaw
        self.calls = []

    def zero_yaw(self):
        self.calls.append("zero_yaw")

    def is_magnetometer_calibrated(self):
        self.calls.append("is_magnetometer_calibrated")
        return self.calibrated

    def get_fused_heading(self):
        self.calls.append("get_fused_heading")
        return self.fused

    def get_yaw(self):
        self.calls.append("get_yaw")
        return self.yaw


def test_calibrated_uses_fused_heading(logger):
    src = HeadingSource(CountingSensor(True, fused=42.0, yaw=10.0), logger=logger)
    reading = src.read()
    assert reading.degrees == 42.0
    assert reading.mode is HeadingMode.FUSED
    assert src.current_heading() == 42.0


def test_uncalibrated_falls_back_to_inverted_yaw(logger):
    src = HeadingSource(CountingSensor(False, fused=42.0, yaw=90.0), logger=logger)
    assert src.current_heading() == pytest.approx(270.0)
    assert src.mode() is HeadingMode.RAW_YAW_FALLBACK
    assert src.current_heading_rad() == pytest.approx(math.radians(270.0))


def test_mode_follows_live_calibration(logger):
    sensor = CountingSensor(False, fused=15.0, yaw=30.0)
    src = HeadingSource(sensor, logger=logger)
    assert src.current_heading() == pytest.approx(330.0)
    sensor.calibrated = True
    assert src.current_heading() == 15.0
    sensor.calibrated = False
    assert src.current_heading() == pytest.approx(330.0)


def test_every_call_reads_the_sensor(logger):
    sensor = CountingSensor(True, fused=1.0)
    src = HeadingSource(sensor, logger=logger)
    src.current_heading()
    src.current_heading()
    assert sensor.calls.count("get_fused_heading") == 2


def test_zero_only_calls_zero_yaw(logger):
    sensor = CountingSensor(True)
    HeadingSource(sensor, logger=logger).zero()
    assert sensor.calls == ["zero_yaw"]


def test_gyro_only_heading_ignores_calibration(logger, recorder):
    src = HeadingSource(CountingSensor(True, fused=5.0, yaw=45.0), logger=logger)
    assert src.gyro_only_heading() == pytest.approx(315.0)
    assert src.log_gyro_heading() == pytest.approx(315.0)
    assert any("gyro_heading" in m for m in recorder.messages("DEBUG"))


def test_fallback_is_not_wrapped():
    assert gyro_only_heading_deg(0.0) == 360.0
    assert gyro_only_heading_deg(-90.0) == 450.0


def test_sensor_fault_propagates(logger):
    sensor = DryRunHeadingSensor(magnetometer_calibrated=True)
    sensor.set_fault("imu offline")
    src = HeadingSource(sensor, logger=logger)
    with pytest.raises(HeadingSensorError, match="imu offline"):
        src.current_heading()


def test_dryrun_sensor_zeroing(logger):
    sensor = DryRunHeadingSensor(yaw_deg=30.0)
    src = HeadingSource(sensor, logger=logger)
    assert src.current_heading() == pytest.approx(330.0)
    src.zero()
    assert sensor.zero_count == 1
    assert src.current_heading() == pytest.approx(360.0)
    sensor.set_raw_yaw(40.0)
    assert src.current_heading() == pytest.approx(350.0)


def test_dryrun_yaw_stays_in_navx_range():
    sensor = DryRunHeadingSensor(yaw_deg=190.0)
    assert sensor.get_yaw() == pytest.approx(-170.0)
    sensor.zero_yaw()
    sensor.set_raw_yaw(-200.0)
    assert sensor.get_yaw() == pytest.approx(-30.0)
    sensor.set_raw_yaw(370.0)
    assert sensor.get_yaw() == pytest.approx(-180.0)
    assert gyro_only_heading_deg(sensor.get_yaw()) == pytest.approx(540.0)


def test_reading_to_dict(logger):
    reading = HeadingSource(CountingSensor(True, fused=10.0), logger=logger).read()
    assert reading.to_dict() == {"degrees": 10.0, "mode": "fused"}
