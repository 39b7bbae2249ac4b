# -*- coding: utf-8 -*-
import pytest

from savo_swerve.models import DrivetrainConfig, make_default_drivetrain_config
from savo_swerve.utils import ParamLoader


class _Param:
    def __init__(self, value):
        self.value = value


class FakeNode:
    """Minimal rclpy.Node parameter surface."""

    def __init__(self, overrides, recorder):
        self.overrides = dict(overrides)
        self.params = {}
        self.recorder = recorder

    def has_parameter(self, name):
        return name in self.params

    def declare_parameter(self, name, default):
        self.params[name] = self.overrides.get(name, default)

    def get_parameter(self, name):
        return _Param(self.params[name])

    def get_logger(self):
        return self.recorder


def test_without_node_returns_defaults():
    pl = ParamLoader(None, component="test")
    assert pl.get_float("loop_hz", default=50.0) == 50.0
    assert pl.get_bool("flag", default=True) is True
    assert pl.values_dict() == {"loop_hz": 50.0, "flag": True}


def test_default_drivetrain_params_build_default_config():
    cfg = DrivetrainConfig.from_mapping(ParamLoader(None).load_drivetrain_params())
    default = make_default_drivetrain_config()
    assert cfg.track_width_m == default.track_width_m
    assert cfg.module("BL").steer_motor_id == default.module("BL").steer_motor_id
    assert cfg.module("BL").steer_offset_rad == pytest.approx(default.module("BL").steer_offset_rad)


def test_overrides_and_clamping(recorder):
    node = FakeNode(
        {
            "loop_hz": 1.0,
            "wheelbase_m": "0.6",
            "modules.FR.drive_motor_id": "0x15",
            "modules.FR.steer_offset_deg": 180.0,
        },
        recorder,
    )
    pl = ParamLoader(node, component="swerve_driver_node")
    assert pl.get_float("loop_hz", default=50.0, lo=5.0) == 5.0
    assert pl.summary.records["loop_hz"].clamped

    cfg = DrivetrainConfig.from_mapping(pl.load_drivetrain_params())
    assert cfg.wheelbase_m == 0.6
    assert cfg.module("FR").drive_motor_id == 21
    assert cfg.module("FR").steer_offset_rad == pytest.approx(3.141592653589793)


def test_invalid_geometry_param_is_not_silently_fixed(recorder):
    from savo_swerve.models import ConfigValidationError

    node = FakeNode({"track_width_m": -1.0}, recorder)
    with pytest.raises(ConfigValidationError):
        DrivetrainConfig.from_mapping(ParamLoader(node).load_drivetrain_params())


def test_log_loaded(recorder):
    node = FakeNode({}, recorder)
    pl = ParamLoader(node, component="c")
    pl.get_str("cmd_topic", default="/cmd_vel")
    pl.get_int("n", default=3, lo=0, hi=10)
    pl.log_loaded()
    lines = recorder.messages("INFO")
    assert lines[0] == "[c] Loaded 2 parameters"
    assert "[c]   cmd_topic = '/cmd_vel' [str]" in lines
    assert "[c]   n = 3 [int] (range=[0,10])" in lines


def test_summary_dict():
    pl = ParamLoader(None, component="c")
    pl.get_int("n", default=3)
    d = pl.summary.to_dict()
    assert d["component"] == "c"
    assert d["params"]["n"]["loaded_value"] == 3
