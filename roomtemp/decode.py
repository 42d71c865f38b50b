#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Raw register and block contents to physical values.

Pure functions, no bus access. Blocks are checked for their protocol
length before any bit is looked at.
"""

import logging
import unittest
from typing import ByteString, Tuple

_log = logging.getLogger(__name__)

AHT10_BLOCK_SIZE = 6
SHT30_BLOCK_SIZE = 6


def check_length(block: ByteString, length: int) -> None:
    """:raise ValueError: `block` has not exactly `length` bytes"""
    if len(block) != length:
        raise ValueError('expected {} bytes, got {}'.format(length, len(block)))


def mcp9801_centigrade(word: int) -> float:
    """MCP9801 ambient temperature register to centigrade.

    The SMBus word is little endian, so the low byte holds the integer part
    and the top nibble the 1/16 fraction. No sign extension: values below
    zero are not supported.
    """
    return (word & 0xFF) + (word >> 12) / 16.0


def aht10_raw(block: ByteString) -> Tuple[int, int]:
    """Unpack the two 20-bit fields of an AHT10 measurement block.

    :param block: 6 bytes, status followed by humidity and temperature
    :return: raw humidity and raw temperature
    """
    check_length(block, AHT10_BLOCK_SIZE)
    humidity = (block[1] << 12) | (block[2] << 4) | (block[3] >> 4)
    temperature = ((block[3] & 0x0F) << 16) | (block[4] << 8) | block[5]
    return humidity, temperature


def aht10_pack(humidity: int, temperature: int, status: int = 0x1C) -> bytes:
    """Inverse of :func:`aht10_raw`, builds a measurement block."""
    if not (0 <= humidity < 1 << 20 and 0 <= temperature < 1 << 20):
        raise ValueError('raw values must fit into 20 bits')
    return bytes((
        status & 0xFF,
        humidity >> 12,
        (humidity >> 4) & 0xFF,
        ((humidity & 0x0F) << 4) | (temperature >> 16),
        (temperature >> 8) & 0xFF,
        temperature & 0xFF,
    ))


def aht10_humidity(block: ByteString) -> float:
    """AHT10 relative humidity in %"""
    return aht10_raw(block)[0] * 100.0 / 2**20


def aht10_centigrade(block: ByteString) -> float:
    """AHT10 temperature in centigrade"""
    return aht10_raw(block)[1] * 200.0 / 2**20 - 50.0


def sht30_centigrade(block: ByteString) -> float:
    """SHT30 temperature in centigrade, CRC bytes are ignored"""
    check_length(block, SHT30_BLOCK_SIZE)
    return -45.0 + 175.0 * (block[0] * 256 + block[1]) / 65535.0


def sht30_humidity(block: ByteString) -> float:
    """SHT30 relative humidity in %, CRC bytes are ignored"""
    check_length(block, SHT30_BLOCK_SIZE)
    return 100.0 * (block[3] * 256 + block[4]) / 65535.0


class TestMethods(unittest.TestCase):
    """Very basic unittest"""
    def setUp(self):
        logging.basicConfig(level=logging.INFO)

    def test_mcp9801(self):
        self.assertEqual(mcp9801_centigrade(0x0019), 25.0)
        self.assertEqual(mcp9801_centigrade(0x1980), 128.0625)

    def test_short_block(self):
        with self.assertRaises(ValueError):
            aht10_raw(b'\x1C\x66\x6D')
