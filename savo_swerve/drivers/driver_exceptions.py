#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/drivers/driver_exceptions.py
-----------------------------------------------------
Exception hierarchy for swerve module actuators and the heading sensor.

- No ROS dependencies
- Exceptions carry optional structured context for logs / diagnostics
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ActuatorErrorContext:
    """
    Optional structured context attached to driver exceptions.

    Common fields (examples):
    - driver="DryRunSwerveModule"
    - module="FR"
    - operation="set"
    - drive_motor_id=2, steer_motor_id=11, steer_encoder_id=34
    - value=6.0
    """
    driver: Optional[str] = None
    module: Optional[str] = None
    operation: Optional[str] = None
    drive_motor_id: Optional[int] = None
    steer_motor_id: Optional[int] = None
    steer_encoder_id: Optional[int] = None
    value: Optional[int | float | str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for key in (
            "driver",
            "module",
            "operation",
            "drive_motor_id",
            "steer_motor_id",
            "steer_encoder_id",
            "value",
        ):
            v = getattr(self, key)
            if v is not None:
                out[key] = v
        if self.extra:
            out["extra"] = dict(self.extra)
        return out

    def format_compact(self) -> str:
        return ", ".join(f"{k}={v}" for k, v in self.to_dict().items())


class ActuatorException(RuntimeError):
    """
    Base exception for Robot Savo swerve driver failures.
    """

    def __init__(
        self,
        message: str,
        *,
        context: Optional[ActuatorErrorContext] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.message = str(message)
        self.context = context
        self.cause = cause
        super().__init__(self.__str__())
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.context is None:
            return self.message
        ctx = self.context.format_compact()
        if not ctx:
            return self.message
        return f"{self.message} [{ctx}]"

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "type": self.__class__.__name__,
            "message": self.message,
        }
        if self.context is not None:
            out["context"] = self.context.to_dict()
        if self.cause is not None:
            out["cause_type"] = self.cause.__class__.__name__
            out["cause_message"] = str(self.cause)
        return out


class ActuatorConfigError(ActuatorException):
    """
    Invalid actuator configuration (ids, limits, missing modules).
    """


class ActuatorCommandError(ActuatorException):
    """
    Invalid module command or failure while applying it.
    """


class ActuatorClosedError(ActuatorCommandError):
    """
    Command sent to an actuator that was already closed.
    """


class HeadingSensorError(ActuatorException):
    """
    Heading sensor read/zero failure.
    """


def wrap_actuator_error(
    exc: BaseException,
    *,
    message: str,
    driver: str = "SwerveModule",
    module: str | None = None,
    operation: str | None = None,
    value: int | float | str | None = None,
    extra: Optional[Dict[str, Any]] = None,
) -> ActuatorCommandError:
    """
    Wrap a low-level exception into an ActuatorCommandError.
    """
    ctx = ActuatorErrorContext(
        driver=driver,
        module=module,
        operation=operation,
        value=value,
        extra=dict(extra or {}),
    )
    return ActuatorCommandError(message, context=ctx, cause=exc)


__all__ = [
    "ActuatorErrorContext",
    "ActuatorException",
    "ActuatorConfigError",
    "ActuatorCommandError",
    "ActuatorClosedError",
    "HeadingSensorError",
    "wrap_actuator_error",
]
