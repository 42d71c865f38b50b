#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Exceptions raised while setting up the bus or reading a sensor.

Every exception carries the failing step as a short human readable text.
:class:`AcquisitionError` subclasses are terminal for the current
acquisition; nothing retries a whole protocol.
"""


class SensorError(Exception):
    """Base class of all sensor related errors."""
    step = 'sensor access failed'
    exit_code = 2

    def __init__(self, step: str = None) -> None:
        if step is not None:
            self.step = step
        Exception.__init__(self, self.step)


class BusSetupError(SensorError):
    """Opening the bus or binding the device address failed."""
    step = 'bus setup failed'
    exit_code = 1


class AcquisitionError(SensorError):
    """A step of a sensor read protocol failed."""
    exit_code = 2


class RegisterReadError(AcquisitionError):
    step = 'register read failed'


class ResetSendError(AcquisitionError):
    step = 'reset failed'


class ResetTimeoutError(AcquisitionError):
    step = 'reset busy timeout'


class CalibrateSendError(AcquisitionError):
    step = 'send calibrate cmd failed'


class CalibrateTimeoutError(AcquisitionError):
    step = 'calibrate busy timeout'


class CalibrationFailedError(AcquisitionError):
    step = 'calibration failed'


class TriggerSendError(AcquisitionError):
    step = 'send trigger cmd failed'


class TriggerTimeoutError(AcquisitionError):
    step = 'trigger busy timeout'


class BlockReadError(AcquisitionError):
    step = 'reading values failed'


class MeasureSendError(AcquisitionError):
    step = 'send measure cmd failed'


class ChecksumError(AcquisitionError):
    step = 'checksum mismatch'
