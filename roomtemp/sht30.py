#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Sensirion SHT30 humidity sensor driver.

Single shot measurements only. The status register does not reliably
signal the end of a conversion, so a fixed delay is used instead of polling.
Sensirion `SHT3x Datasheets <https://www.sensirion.com/en/environmental-sensors/humidity-sensors/humidity-temperature-sensor-sht3x-digital-i2c-accurate/>`
"""

import time
import logging
import collections

from .bus import read_block
from .crc import words_valid
from .decode import SHT30_BLOCK_SIZE, sht30_centigrade, sht30_humidity
from .errors import MeasureSendError, ChecksumError
from .reading import Capability, Reading

_log = logging.getLogger(__name__)


HML = collections.namedtuple('HML', ('high', 'medium', 'low'))


class Cmd(object):
    # (msb, lsb) single shot commands
    measure_single = HML((0x24, 0x00), (0x24, 0x0B), (0x24, 0x16))
    measure_single_stretch = HML((0x2C, 0x06), (0x2C, 0x0D), (0x2C, 0x10))


class SHT30(object):
    """humidity-temperature sensor SHT30, works for SHT31 and SHT35 as well."""
    default_addr = 0x44
    alternate_addr = 0x45
    capability = Capability.TEMPERATURE | Capability.HUMIDITY
    display_precision = 2

    # conversion time without clock stretching
    settle_delay = HML(0.020, 0.0065, 0.0045)

    def __init__(self, transport, repeatability: str = 'high', clock_stretching: bool = False,
                 verify_crc: bool = False) -> None:
        """Initialize

        :param transport: bus transport bound to the sensor's address
        :param repeatability: low, medium or high
        :param clock_stretching: let the sensor hold the clock until the conversion is done
        :param verify_crc: check the CRC byte of both data words
        """
        if repeatability not in HML._fields:
            raise ValueError('repeatability must be one of {}'.format(', '.join(HML._fields)))
        self.bus = transport
        self.repeatability = repeatability
        self.clock_stretching = clock_stretching
        self.verify_crc = verify_crc

    def measure(self) -> None:
        """Send the single shot command and wait for the conversion."""
        commands = Cmd.measure_single_stretch if self.clock_stretching else Cmd.measure_single
        msb, lsb = getattr(commands, self.repeatability)
        try:
            self.bus.write_byte_data(msb, lsb)
        except OSError as exc:
            raise MeasureSendError() from exc

        if not self.clock_stretching:
            time.sleep(getattr(self.settle_delay, self.repeatability))

    def read(self) -> Reading:
        """Run a measurement.

        :return: reading with temperature and humidity
        """
        self.measure()
        data = read_block(self.bus, 0x00, SHT30_BLOCK_SIZE)
        if self.verify_crc and not words_valid(data):
            raise ChecksumError()
        return Reading.create(temperature=sht30_centigrade(data), humidity=sht30_humidity(data), raw=data)
