#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import unittest

from roomtemp.decode import (aht10_centigrade, aht10_humidity, aht10_pack, aht10_raw, mcp9801_centigrade,
                             sht30_centigrade, sht30_humidity)

AHT10_BLOCK = bytes((0x1C, 0x66, 0x6D, 0x5C, 0x63, 0x5D))
SHT30_BLOCK = bytes((0x66, 0x6D, 0x00, 0x5C, 0x63, 0x00))


class TestMCP9801(unittest.TestCase):

    def test_integer_part_is_low_byte(self):
        self.assertEqual(mcp9801_centigrade(0x0019), 25.0)

    def test_fraction_is_top_nibble(self):
        self.assertEqual(mcp9801_centigrade(0x1900), 0.0625)
        self.assertEqual(mcp9801_centigrade(0x1980), 128.0625)
        self.assertEqual(mcp9801_centigrade(0x8016), 22.5)

    def test_unsigned(self):
        self.assertEqual(mcp9801_centigrade(0xF0FF), 255.9375)


class TestAHT10(unittest.TestCase):

    def test_raw_fields(self):
        self.assertEqual(aht10_raw(AHT10_BLOCK), (0x666D5, 0xC635D))

    def test_example_block(self):
        self.assertAlmostEqual(aht10_humidity(AHT10_BLOCK), 0x666D5 * 100 / 2**20)
        self.assertAlmostEqual(aht10_humidity(AHT10_BLOCK), 40.01, places=2)
        self.assertAlmostEqual(aht10_centigrade(AHT10_BLOCK), 0xC635D * 200 / 2**20 - 50)
        self.assertAlmostEqual(aht10_centigrade(AHT10_BLOCK), 104.85, places=2)

    def test_pack_inverts_raw(self):
        self.assertEqual(aht10_pack(0x666D5, 0xC635D), AHT10_BLOCK)
        for humidity, temperature in ((0, 0), (0xFFFFF, 0xFFFFF), (0x80000, 0x00001), (0x12345, 0xABCDE)):
            self.assertEqual(aht10_raw(aht10_pack(humidity, temperature)), (humidity, temperature))

    def test_limits(self):
        self.assertEqual(aht10_centigrade(aht10_pack(0, 0)), -50.0)
        self.assertEqual(aht10_humidity(aht10_pack(0x80000, 0x80000)), 50.0)
        self.assertEqual(aht10_centigrade(aht10_pack(0x80000, 0x80000)), 50.0)

    def test_pack_range(self):
        with self.assertRaises(ValueError):
            aht10_pack(1 << 20, 0)

    def test_wrong_length(self):
        for block in (b'', AHT10_BLOCK[:5], AHT10_BLOCK + b'\x00'):
            with self.assertRaises(ValueError):
                aht10_raw(block)


class TestSHT30(unittest.TestCase):

    def test_example_block(self):
        self.assertEqual('{:.2f}'.format(sht30_centigrade(SHT30_BLOCK)), '25.02')
        self.assertEqual('{:.1f}'.format(sht30_humidity(SHT30_BLOCK)), '36.1')
        self.assertAlmostEqual(sht30_centigrade(SHT30_BLOCK), -45 + 175 * 0x666D / 65535)
        self.assertAlmostEqual(sht30_humidity(SHT30_BLOCK), 100 * 0x5C63 / 65535)

    def test_crc_bytes_ignored(self):
        other = bytes((0x66, 0x6D, 0xFF, 0x5C, 0x63, 0xFF))
        self.assertEqual(sht30_centigrade(other), sht30_centigrade(SHT30_BLOCK))

    def test_range(self):
        self.assertEqual(sht30_centigrade(b'\x00\x00\x00\x00\x00\x00'), -45.0)
        self.assertEqual(sht30_centigrade(b'\xFF\xFF\x00\xFF\xFF\x00'), 130.0)
        self.assertEqual(sht30_humidity(b'\xFF\xFF\x00\xFF\xFF\x00'), 100.0)

    def test_wrong_length(self):
        with self.assertRaises(ValueError):
            sht30_humidity(SHT30_BLOCK[:4])


if __name__ == '__main__':
    unittest.main()
