#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Select the driver of a chip and run one acquisition.
"""

import enum
import logging
from typing import Union

from .aht10 import AHT10
from .bus import Transport
from .errors import BusSetupError
from .mcp9801 import MCP9801
from .reading import Reading
from .sht30 import SHT30

_log = logging.getLogger(__name__)

ALTERNATE = 'alt'


class ChipKind(enum.Enum):
    """Supported sensor chips."""
    MCP9801 = 'mcp9801'
    AHT10 = 'aht10'
    SHT30 = 'sht30'

    @classmethod
    def parse(cls, name: str) -> 'ChipKind':
        """case insensitive lookup by name

        :raise ValueError: unknown chip
        """
        return cls(name.strip().lower())

    @property
    def driver(self):
        return DRIVERS[self]


DRIVERS = {
    ChipKind.MCP9801: MCP9801,
    ChipKind.AHT10: AHT10,
    ChipKind.SHT30: SHT30,
}


def open_transport(chip: ChipKind, bus: Union[int, str] = 1, device_addr: Union[int, str] = None) -> Transport:
    """Open the bus bound to the chip's default address or `device_addr`.

    :param device_addr: I2C address, None for the default or `alt` for the alternate one
    :raise BusSetupError: bus can not be opened or the chip has no alternate address
    """
    if device_addr is None:
        device_addr = chip.driver.default_addr
    elif device_addr == ALTERNATE:
        device_addr = getattr(chip.driver, 'alternate_addr', None)
        if device_addr is None:
            raise BusSetupError('{} has no alternate address'.format(chip.value))
    return Transport(bus, device_addr)


def acquire(chip: ChipKind, transport, **options) -> Reading:
    """Run the read protocol of `chip` once.

    :param chip: sensor on the bus
    :param transport: bus transport bound to the sensor's address
    :param options: driver specific keyword arguments
    :return: reading of all quantities the chip provides
    :raise AcquisitionError: any protocol step failed, no retry of the whole protocol
    """
    driver = chip.driver(transport, **options)
    _log.debug('acquire %s', chip.value)
    reading = driver.read()
    _log.debug('%s: %s', chip.value, reading)
    return reading
