#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CRC-8 routine used by Sensirion sensor ICs.

Every 16-bit data word is followed by one CRC byte. Polynom
x^8 + x^5 + x^4 + 1 (0x131), initial value 0xFF.
"""

import logging
import unittest
from typing import ByteString

_log = logging.getLogger(__name__)


def crc8(data: ByteString, crc: int = 0xFF) -> int:
    """Calculates CRC checksum of data with Polynom x^8 + x^5 + x^4 + 1

    When `data` is inclusive CRC the result is 0. That's CRC magic.

    :param data: data bytes
    :param crc: initial crc value, 0xFF for Sensirion sensors
    :return: CRC value
    """
    for d in data:
        crc ^= d
        crc ^= ((crc >> 3) ^ (crc >> 4) ^ (crc >> 6))
        crc ^= ((crc << 4) ^ (crc << 5)) & 0xFF
    return crc


def words_valid(block: ByteString) -> bool:
    """Check every `word + crc` triple of a block read from the sensor."""
    for i in range(0, len(block) - 2, 3):
        if crc8(block[i:i + 3]) != 0:
            _log.debug('crc mismatch in %s', bytes(block[i:i + 3]).hex())
            return False
    return True


class TestMethods(unittest.TestCase):
    """Very basic unittest"""
    def setUp(self):
        logging.basicConfig(level=logging.INFO)

    def test_crc_sht3x_datasheet(self):
        """SHT3x datasheet example"""
        self.assertEqual(crc8(b'\xBE\xEF'), 0x92)
        self.assertEqual(crc8(b'\xBE\xEF\x92'), 0)
        self.assertTrue(words_valid(b'\xBE\xEF\x92\xBE\xEF\x92'))
        self.assertFalse(words_valid(b'\xBE\xEF\x92\xBE\xEF\x93'))
