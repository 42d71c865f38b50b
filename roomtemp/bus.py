#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
I2C bus transport bound to a single device address.

The drivers only talk to the methods below, so any object offering them
(e.g. a fake bus in unit tests) may stand in for :class:`Transport`.
"""

import logging
from typing import Union, Sequence, List
from smbus2 import SMBus

from .errors import BusSetupError, BlockReadError

_log = logging.getLogger(__name__)


class Transport(SMBus):
    """SMBus with the device address bound once at construction."""

    def __init__(self, bus: Union[int, str] = 1, device_addr: int = 0x4F) -> None:
        """Open the bus and bind the device address.

        :param bus: I2C bus identification number or a filesystem name like `/dev/i2c-something`
        :param device_addr: 7-bit I2C device address
        :raise BusSetupError: bus can not be opened or address is out of range
        """
        try:
            SMBus.__init__(self, bus, force=True)
        except OSError as exc:
            raise BusSetupError('could not open i2c bus {}: {}'.format(bus, exc)) from exc

        if not 0x03 <= device_addr <= 0x77:
            self.close()
            raise BusSetupError('invalid device address 0x{:02X}'.format(device_addr))

        self.device_addr = device_addr
        _log.debug('bus %s opened, device address 0x%02X', bus, device_addr)

    def read_byte(self, *args, **kwargs) -> int:
        """Overridden :method:`read_byte` from :class:`SMBus` without I2C address parameter."""
        return SMBus.read_byte(self, self.device_addr, *args, **kwargs)

    def write_byte(self, *args, **kwargs) -> None:
        """Overridden :method:`write_byte` from :class:`SMBus` without I2C address parameter."""
        return SMBus.write_byte(self, self.device_addr, *args, **kwargs)

    def read_byte_data(self, *args, **kwargs) -> int:
        """Overridden :method:`read_byte_data` from :class:`SMBus` without I2C address parameter."""
        return SMBus.read_byte_data(self, self.device_addr, *args, **kwargs)

    def write_byte_data(self, *args, **kwargs) -> None:
        """Overridden :method:`write_byte_data` from :class:`SMBus` without I2C address parameter."""
        return SMBus.write_byte_data(self, self.device_addr, *args, **kwargs)

    def read_word_data(self, *args, **kwargs) -> int:
        """Overridden :method:`read_word_data` from :class:`SMBus` without I2C address parameter."""
        return SMBus.read_word_data(self, self.device_addr, *args, **kwargs)

    def read_i2c_block_data(self, register: int, length: int, force: bool = None) -> List[int]:
        """Overridden :method:`read_i2c_block_data` from :class:`SMBus` without I2C address parameter."""
        return SMBus.read_i2c_block_data(self, self.device_addr, register, length, force)

    def write_i2c_block_data(self, register: int, data: Sequence[int], force: bool = None) -> None:
        """Overridden :method:`write_i2c_block_data` from :class:`SMBus` without I2C address parameter."""
        return SMBus.write_i2c_block_data(self, self.device_addr, register, list(data), force)


def read_block(transport, register: int, length: int) -> bytes:
    """Read a fixed size block, a short read counts as failed.

    :raise BlockReadError: transport failure or less than `length` bytes
    """
    try:
        data = bytes(transport.read_i2c_block_data(register, length))
    except OSError as exc:
        raise BlockReadError() from exc
    if len(data) != length:
        raise BlockReadError('reading values failed: got {} of {} bytes'.format(len(data), length))
    _log.debug('block 0x%02X: %s', register, ' '.join('0x{:02x}'.format(b) for b in data))
    return data
