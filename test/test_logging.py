# -*- coding: utf-8 -*-
import logging

from savo_swerve.utils import (
    LoggerAdapter,
    RateLimitedLogger,
    format_event,
    format_kv,
    get_logger_adapter,
    log_event,
    log_exception,
)


def test_format_kv_and_event():
    assert format_kv(module="FR", volts=6.0) == "module=FR volts=6.0"
    assert format_event("drivetrain_init", component="drivetrain", details={"max_mps": 4.5}) == (
        "[drivetrain] drivetrain_init max_mps=4.5"
    )
    assert format_event("snapshot", details={"pairs": [1, 2]}) == 'snapshot details={"pairs":[1,2]}'
    assert format_event("tick") == "tick"


def test_log_event_levels(logger, recorder):
    log_event(logger, "a", level="DEBUG")
    log_event(logger, "b", level="warning")
    log_event(logger, "c", level="ERROR")
    log_event(logger, "d")
    assert [lvl for lvl, _ in recorder.records] == ["DEBUG", "WARN", "ERROR", "INFO"]


def test_log_exception_one_line(logger, recorder):
    log_exception(logger, ValueError("bad"), message="boom", component="node")
    assert recorder.messages("ERROR") == ["[node] boom | ValueError: bad"]


def test_adapter_sources(recorder):
    assert get_logger_adapter(None, name="savo_swerve.test").is_std_logger

    adapter = LoggerAdapter(target=recorder)
    assert get_logger_adapter(adapter) is adapter

    class FakeNode:
        def get_logger(self):
            return recorder

    get_logger_adapter(FakeNode()).info("hello")
    assert recorder.messages("INFO") == ["hello"]

    std = logging.getLogger("savo_swerve.test.std")
    assert get_logger_adapter(std).target is std


def test_rate_limited_logger(logger, recorder):
    rl = RateLimitedLogger(logger, period_s=60.0)
    assert rl.error("k", "first") is True
    assert rl.error("k", "second") is False
    assert rl.warn("other", "third") is True
    assert recorder.messages() == ["first", "third"]

    rl_always = RateLimitedLogger(logger, period_s=0.0)
    assert rl_always.info("k", "x") and rl_always.info("k", "y")
