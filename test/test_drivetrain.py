# -*- coding: utf-8 -*-
import math
import threading

import pytest

from savo_swerve.drivetrain import (
    DrivetrainConfigError,
    HeadingUnavailableError,
    SwerveDrivetrain,
)
from savo_swerve.kinematics import ChassisSpeeds, KinematicsValueError, ModuleGeometry, ModuleName
from savo_swerve.models import ModuleCommandSet, PlatformLimits


@pytest.fixture
def dt(config, modules, heading, logger):
    return SwerveDrivetrain(config, modules, heading_source=heading, logger=logger)


def test_init_logs_limits(dt, recorder):
    assert any("drivetrain_init" in m for m in recorder.messages("INFO"))


def test_default_command_is_zero_motion(dt, modules):
    assert dt.current_command().is_zero()
    cmd_set = dt.tick()
    assert isinstance(cmd_set, ModuleCommandSet)
    assert cmd_set.as_pairs() == ((0.0, 0.0),) * 4
    for m in modules.values():
        assert m.get_last_command() == (0.0, 0.0)


def test_drive_only_stores(dt, modules):
    dt.drive(ChassisSpeeds(1.0, 0.0, 0.0))
    assert all(m.command_count == 0 for m in modules.values())
    assert dt.current_command() == ChassisSpeeds(1.0, 0.0, 0.0)


def test_half_speed_forward_gives_half_voltage(dt, modules):
    dt.drive(ChassisSpeeds(dt.limits.max_linear_speed_mps / 2.0, 0.0, 0.0))
    cmd_set = dt.tick()
    for volts, angle in cmd_set.as_pairs():
        assert volts == pytest.approx(6.0)
        assert angle == pytest.approx(0.0)
    assert modules[ModuleName.BR].get_last_command() == pytest.approx((6.0, 0.0))


def test_over_speed_saturates_at_max_voltage(dt):
    dt.drive(ChassisSpeeds(10.0 * dt.limits.max_linear_speed_mps, 0.0, 1.0))
    volts = [abs(v) for v, _ in dt.tick().as_pairs()]
    assert max(volts) == pytest.approx(12.0)
    assert all(v <= 12.0 + 1e-9 for v in volts)


def test_pure_rotation_voltages_equal(dt):
    dt.drive(ChassisSpeeds(0.0, 0.0, dt.limits.max_angular_speed_radps / 4.0))
    volts = [v for v, _ in dt.tick().as_pairs()]
    assert volts == pytest.approx([3.0] * 4)


def test_last_write_wins(dt):
    dt.drive(ChassisSpeeds(1.0, 0.0, 0.0))
    dt.drive(ChassisSpeeds(0.0, 1.0, 0.0))
    angles = [a for _, a in dt.tick().as_pairs()]
    assert angles == pytest.approx([math.pi / 2.0] * 4)


def test_tick_is_idempotent(dt, modules):
    dt.drive(ChassisSpeeds(0.5, -0.25, 0.3))
    first = dt.tick()
    second = dt.tick()
    assert first.as_pairs() == second.as_pairs()
    assert second.seq == first.seq + 1
    assert dt.last_command_set() is second
    assert all(m.command_count == 2 for m in modules.values())


def test_stopping_holds_wheel_angles(dt):
    dt.drive(ChassisSpeeds(0.0, 1.0, 0.0))
    dt.tick()
    dt.stop()
    pairs = dt.tick().as_pairs()
    assert [v for v, _ in pairs] == [0.0] * 4
    assert [a for _, a in pairs] == pytest.approx([math.pi / 2.0] * 4)


def test_actuator_failure_aborts_cycle_and_reraises(dt, modules, recorder):
    dt.drive(ChassisSpeeds(1.0, 0.0, 0.0))
    err = RuntimeError("CAN bus off")
    modules[ModuleName.FR].fail_next(err)

    with pytest.raises(RuntimeError) as excinfo:
        dt.tick()
    assert excinfo.value is err

    assert modules[ModuleName.FL].command_count == 1
    assert modules[ModuleName.FR].command_count == 0
    assert modules[ModuleName.BL].command_count == 0
    assert modules[ModuleName.BR].command_count == 0
    errors = recorder.messages("ERROR")
    assert len(errors) == 1
    assert "module_command_failed" in errors[0] and "module=FR" in errors[0]

    # next cycle runs normally
    dt.tick()
    assert all(m.command_count >= 1 for m in modules.values())


def test_repeated_failures_are_rate_limited(dt, modules, recorder):
    for _ in range(3):
        modules[ModuleName.BL].fail_next(RuntimeError("timeout"))
        with pytest.raises(RuntimeError):
            dt.tick()
    assert len(recorder.messages("ERROR")) == 1


def test_failed_cycle_is_not_recorded_as_sent(dt, modules):
    modules[ModuleName.FR].fail_next(RuntimeError("CAN bus off"))
    with pytest.raises(RuntimeError):
        dt.tick()
    assert dt.last_command_set() is None
    assert dt.to_dict()["last_command_set"] is None

    ok = dt.tick()
    dt.drive(ChassisSpeeds(1.0, 0.0, 0.0))
    modules[ModuleName.BR].fail_next(RuntimeError("CAN bus off"))
    with pytest.raises(RuntimeError):
        dt.tick()
    assert dt.last_command_set() is ok


def test_non_finite_drive_rejected(dt):
    with pytest.raises(KinematicsValueError):
        dt.drive(ChassisSpeeds(float("nan"), 0.0, 0.0))
    with pytest.raises(TypeError):
        dt.drive((1.0, 0.0, 0.0))
    assert dt.current_command() == ChassisSpeeds.zero()


def test_numeric_string_command_rejected_at_intake(dt, modules):
    with pytest.raises(KinematicsValueError):
        dt.drive(ChassisSpeeds("1.0", 0.0, 0.0))
    assert dt.current_command() == ChassisSpeeds.zero()
    assert dt.tick().as_pairs() == ((0.0, 0.0),) * 4
    assert all(m.command_count == 1 for m in modules.values())


def test_accepts_ordered_sequence(config, modules, logger):
    ordered = [modules[n] for n in (ModuleName.FL, ModuleName.FR, ModuleName.BL, ModuleName.BR)]
    dt = SwerveDrivetrain(config, ordered, logger=logger)
    dt.drive(ChassisSpeeds(0.0, 0.0, 1.0))
    dt.tick()
    assert ordered[0].get_last_command()[1] == pytest.approx(3.0 * math.pi / 4.0)


def test_string_keys_accepted(config, modules, logger):
    by_str = {n.value.lower(): m for n, m in modules.items()}
    SwerveDrivetrain(config, by_str, logger=logger)


def test_missing_module_rejected(config, modules, logger):
    partial = dict(modules)
    del partial[ModuleName.BR]
    with pytest.raises(DrivetrainConfigError):
        SwerveDrivetrain(config, partial, logger=logger)
    with pytest.raises(DrivetrainConfigError):
        SwerveDrivetrain(config, list(modules.values())[:3], logger=logger)
    with pytest.raises(DrivetrainConfigError):
        SwerveDrivetrain(config, {**modules, "XX": object()}, logger=logger)


def test_limits_require_geometry(modules, logger):
    limits = PlatformLimits(max_linear_speed_mps=4.0, max_angular_speed_radps=10.0, max_voltage=12.0)
    with pytest.raises(DrivetrainConfigError):
        SwerveDrivetrain(limits, modules, logger=logger)
    dt = SwerveDrivetrain(limits, modules, logger=logger, geometry=ModuleGeometry.from_dimensions(0.5, 0.5))
    dt.drive(ChassisSpeeds(2.0, 0.0, 0.0))
    assert [v for v, _ in dt.tick().as_pairs()] == pytest.approx([6.0] * 4)


def test_zero_gyroscope_delegates(dt, sensor, recorder):
    sensor.set_raw_yaw(90.0)
    assert dt.get_gyroscope_rotation() == pytest.approx(270.0)
    dt.zero_gyroscope()
    assert sensor.zero_count == 1
    assert any("heading_zeroed" in m for m in recorder.messages("INFO"))
    assert dt.get_gyroscope_rotation() == pytest.approx(360.0)


def test_no_heading_source(config, modules, logger):
    dt = SwerveDrivetrain(config, modules, logger=logger)
    with pytest.raises(HeadingUnavailableError):
        dt.zero_gyroscope()
    with pytest.raises(HeadingUnavailableError):
        dt.get_gyroscope_rotation()


def test_concurrent_drive_never_mixes_a_cycle(dt):
    commands = [ChassisSpeeds(1.0, 0.0, 0.0), ChassisSpeeds(0.0, 1.0, 0.0)]
    stop = threading.Event()

    def producer():
        i = 0
        while not stop.is_set():
            dt.drive(commands[i % 2])
            i += 1

    t = threading.Thread(target=producer)
    t.start()
    try:
        for _ in range(200):
            pairs = dt.tick().as_pairs()
            assert len(set(pairs)) == 1
    finally:
        stop.set()
        t.join()


def test_concurrent_ticks_get_distinct_sequence_numbers(dt):
    assert not hasattr(dt, "compute")
    dt.drive(ChassisSpeeds(0.3, 0.2, 0.1))
    seqs = []
    lock = threading.Lock()

    def ticker():
        for _ in range(100):
            cs = dt.tick()
            with lock:
                seqs.append(cs.seq)

    threads = [threading.Thread(target=ticker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert sorted(seqs) == list(range(1, 401))
    assert dt.seq == 400


def test_to_dict(dt):
    dt.tick()
    d = dt.to_dict()
    assert d["seq"] == 1
    assert d["last_command_set"]["commands"]["FL"]["voltage"] == 0.0
