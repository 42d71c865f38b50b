#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Microchip MCP9801 ambient temperature sensor driver.

`MCP9801 Datasheet <https://ww1.microchip.com/downloads/en/DeviceDoc/21909d.pdf>`
"""

import enum
import time
import struct
import logging

from .decode import mcp9801_centigrade
from .errors import RegisterReadError
from .reading import Capability, Reading

_log = logging.getLogger(__name__)


class Reg(enum.IntEnum):
    """MCP9801 registers."""
    temperature = 0x00
    configuration = 0x01
    hysteresis = 0x02
    limit = 0x03


class MCP9801(object):
    """Room temperature sensor, 12-bit resolution."""
    default_addr = 0x4F
    capability = Capability.TEMPERATURE
    display_precision = 1

    # 12-bit ADC resolution, continuous conversion
    config_value = 0x60
    # first conversion after switching to 12-bit resolution
    settle_delay = 0.330

    def __init__(self, transport) -> None:
        """Initialize

        :param transport: bus transport bound to the sensor's address
        """
        self.bus = transport

    def _configure(self) -> bool:
        """Set 12-bit resolution if not yet done.

        :return: true if the configuration register has been modified
        """
        try:
            config = self.bus.read_byte_data(Reg.configuration)
        except OSError as exc:
            raise RegisterReadError('config reg read failed') from exc

        # do not re-configure on and on again
        if config == self.config_value:
            return False

        _log.warning('Wrong config 0x%02x. Setting it to 0x%02x', config, self.config_value)
        try:
            self.bus.write_byte_data(Reg.configuration, self.config_value)
        except OSError as exc:
            # the read still works, just with the old resolution
            _log.warning('config reg write failed: %s', exc)
        time.sleep(self.settle_delay)
        return True

    def read(self) -> Reading:
        """Configure if needed and read the ambient temperature."""
        self._configure()

        try:
            word = self.bus.read_word_data(Reg.temperature)
        except OSError as exc:
            raise RegisterReadError('temperature reg read failed') from exc

        _log.debug('raw=0x%04x', word)
        return Reading.create(temperature=mcp9801_centigrade(word), raw=struct.pack('>H', word))
