# -*- coding: utf-8 -*-
import pytest

from savo_swerve.drivers import (
    ActuatorClosedError,
    ActuatorCommandError,
    ActuatorConfigError,
    DryRunSwerveModule,
    HeadingSensor,
    SwerveModuleActuator,
    DryRunHeadingSensor,
    close_modules,
)
from savo_swerve.kinematics import MODULE_ORDER, ModuleName


def test_factory_builds_four_named_modules(modules, config):
    assert list(modules) == list(MODULE_ORDER)
    fr = modules[ModuleName.FR]
    assert fr.name is ModuleName.FR
    assert fr.hardware == config.module("FR")
    assert isinstance(fr, SwerveModuleActuator)
    assert isinstance(DryRunHeadingSensor(), HeadingSensor)


def test_set_records_and_clamps():
    m = DryRunSwerveModule("fl", max_voltage=12.0)
    m.set(6.0, 0.5)
    m.set(20.0, -0.5)
    assert m.get_last_command() == (12.0, -0.5)
    assert [c.as_pair() for c in m.get_history()] == [(6.0, 0.5), (12.0, -0.5)]
    assert m.command_count == 2


def test_non_numeric_command_wrapped():
    m = DryRunSwerveModule("BL")
    with pytest.raises(ActuatorCommandError) as excinfo:
        m.set("x", 0.0)
    assert excinfo.value.context.module == "BL"
    assert excinfo.value.to_dict()["cause_type"] == "ValueError"


def test_fail_next_raises_once():
    m = DryRunSwerveModule("BR")
    err = RuntimeError("can timeout")
    m.fail_next(err)
    with pytest.raises(RuntimeError) as excinfo:
        m.set(1.0, 0.0)
    assert excinfo.value is err
    m.set(1.0, 0.0)
    assert m.command_count == 1


def test_stop_holds_angle_and_close_blocks_commands():
    m = DryRunSwerveModule("FR")
    m.set(3.0, 1.2)
    m.stop()
    assert m.get_last_command() == (0.0, 1.2)
    m.close()
    assert not m.is_open
    with pytest.raises(ActuatorClosedError):
        m.set(1.0, 0.0)
    m.close()


def test_close_modules_stops_everything(modules):
    for m in modules.values():
        m.set(5.0, 0.3)
    close_modules(modules)
    for m in modules.values():
        assert not m.is_open
        assert m.get_last_command() == (0.0, 0.3)


@pytest.mark.parametrize("kwargs", [{"max_voltage": 0.0}, {"max_voltage": "abc"}, {"max_history": 0}])
def test_bad_module_config(kwargs):
    with pytest.raises(ActuatorConfigError):
        DryRunSwerveModule("FL", **kwargs)


def test_diagnostics_snapshots(config):
    m = DryRunSwerveModule("FL", hardware=config.module("FL"))
    m.set(1.5, 0.25)
    state = m.get_state_dict()
    assert state["name"] == "FL"
    assert state["hardware"]["drive_motor_id"] == 5
    assert "FL" in m.summary() and "cmds=1" in m.summary()

    sensor = DryRunHeadingSensor(yaw_deg=12.0)
    sensor.zero_yaw()
    assert sensor.get_state_dict()["yaw_ref_deg"] == 12.0
