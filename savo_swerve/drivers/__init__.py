#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO — savo_swerve/drivers/__init__.py
--------------------------------------------
Public exports for `savo_swerve.drivers`.

Real CAN module drivers and the physical IMU driver live outside this
package; here are the collaborator protocols, the exception hierarchy and
the dry-run stand-ins used for bringup and tests.
"""

from .driver_exceptions import (
    ActuatorClosedError,
    ActuatorCommandError,
    ActuatorConfigError,
    ActuatorErrorContext,
    ActuatorException,
    HeadingSensorError,
    wrap_actuator_error,
)
from .dryrun_heading_sensor import DryRunHeadingSensor
from .dryrun_module import (
    DryRunModuleCommand,
    DryRunSwerveModule,
    close_modules,
    make_dryrun_modules,
)
from .interfaces import HeadingSensor, SwerveModuleActuator

__all__ = [
    # exceptions
    "ActuatorClosedError",
    "ActuatorCommandError",
    "ActuatorConfigError",
    "ActuatorErrorContext",
    "ActuatorException",
    "HeadingSensorError",
    "wrap_actuator_error",
    # interfaces
    "HeadingSensor",
    "SwerveModuleActuator",
    # dry-run
    "DryRunHeadingSensor",
    "DryRunModuleCommand",
    "DryRunSwerveModule",
    "close_modules",
    "make_dryrun_modules",
]
