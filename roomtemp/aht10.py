#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Aosong AHT10 humidity and temperature sensor driver.

A low-cost sensor, humidity values are not very accurate.
Every measurement calibrates the chip first, waits until it is idle and
then triggers a conversion.
"""

import enum
import time
import logging

from .poll import PollOutcome, poll, status_probe
from .bus import read_block
from .decode import AHT10_BLOCK_SIZE, aht10_centigrade, aht10_humidity
from .errors import (ResetSendError, ResetTimeoutError, CalibrateSendError, CalibrateTimeoutError,
                     CalibrationFailedError, TriggerSendError, TriggerTimeoutError)
from .reading import Capability, Reading

_log = logging.getLogger(__name__)


class Cmd(enum.IntEnum):
    """AHT10 commands"""
    calibrate = 0xE1
    trigger = 0xAC
    soft_reset = 0xBA


class StatusBit(enum.IntEnum):
    """status byte bits"""
    busy = 0x80
    calibrated = 0x08


class AHT10(object):
    """humidity-temperature sensor AHT10."""
    default_addr = 0x38
    alternate_addr = 0x39
    capability = Capability.TEMPERATURE | Capability.HUMIDITY
    display_precision = 2

    calibrate_payload = (0x08, 0x00)
    trigger_payload = (0x33, 0x00)

    reset_delay = 0.020
    # (delay in ms, retries) of each busy wait
    reset_wait = (10, 20)
    calibrate_wait = (10, 20)
    trigger_wait = (20, 20)

    def __init__(self, transport, soft_reset: bool = False, strict: bool = False) -> None:
        """Initialize

        :param transport: bus transport bound to the sensor's address
        :param soft_reset: reset the chip before calibration
        :param strict: fail if sending the calibration command fails
        """
        self.bus = transport
        self.soft_reset = soft_reset
        self.strict = strict
        self._busy = status_probe(transport, StatusBit.busy)

    def _wait(self, budget) -> PollOutcome:
        return poll(self._busy, *budget)

    def reset(self) -> None:
        """Soft reset"""
        try:
            self.bus.write_byte(Cmd.soft_reset)
        except OSError as exc:
            raise ResetSendError() from exc
        time.sleep(self.reset_delay)

        if self._wait(self.reset_wait) is PollOutcome.TIMED_OUT:
            raise ResetTimeoutError()

    def calibrate(self) -> None:
        """Send the calibration command and check the calibrated flag."""
        try:
            self.bus.write_i2c_block_data(Cmd.calibrate, self.calibrate_payload)
        except OSError as exc:
            if self.strict:
                raise CalibrateSendError() from exc
            _log.info('send calibrate cmd failed, continuing: %s', exc)

        if self._wait(self.calibrate_wait) is PollOutcome.TIMED_OUT:
            raise CalibrateTimeoutError()

        try:
            status = self.bus.read_byte()
        except OSError as exc:
            # a failed read is all bits set, as for the busy wait
            _log.info('status read failed, assuming calibrated: %s', exc)
            status = 0xFF
        if not status & StatusBit.calibrated:
            raise CalibrationFailedError()

    def trigger(self) -> None:
        """Start a measurement and wait for its completion."""
        try:
            self.bus.write_i2c_block_data(Cmd.trigger, self.trigger_payload)
        except OSError as exc:
            raise TriggerSendError() from exc

        if self._wait(self.trigger_wait) is PollOutcome.TIMED_OUT:
            raise TriggerTimeoutError()

    def read(self) -> Reading:
        """Run a complete measurement cycle.

        :return: reading with temperature and humidity
        """
        if self.soft_reset:
            self.reset()
        self.calibrate()
        self.trigger()

        data = read_block(self.bus, 0x00, AHT10_BLOCK_SIZE)
        return Reading.create(temperature=aht10_centigrade(data), humidity=aht10_humidity(data), raw=data)
