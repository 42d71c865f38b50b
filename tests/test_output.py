#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import unittest

from roomtemp.output import degree_suffix, format_reading
from roomtemp.reading import Reading

ROOM = Reading.create(temperature=22.5, raw=b'\x80\x16')
AIR = Reading.create(temperature=25.018692, humidity=36.089112, raw=bytes((0x66, 0x6D, 0x00, 0x5C, 0x63, 0x00)))


class TestDegree(unittest.TestCase):

    def test_encodings(self):
        self.assertEqual(degree_suffix('utf-8'), '°C')
        self.assertEqual(degree_suffix('ISO-8859-1'), '°C')
        self.assertEqual(degree_suffix('ascii'), "'C")
        self.assertEqual(degree_suffix('no-such-codec'), "'C")


class TestFormat(unittest.TestCase):

    def test_full(self):
        self.assertEqual(format_reading(ROOM, precision=1, degree='°C'), ['Temp=22.5°C'])
        self.assertEqual(format_reading(AIR, degree="'C"), ["Temp=25.02'C", 'Humi=36.1%'])

    def test_bare(self):
        self.assertEqual(format_reading(ROOM, 'temperature'), ['22.50'])
        self.assertEqual(format_reading(AIR, 'humidity'), ['36.1'])

    def test_raw(self):
        self.assertEqual(format_reading(ROOM, 'temperature', raw=True), ['Raw=0x8016', '22.50'])
        self.assertEqual(format_reading(AIR, 'humidity', raw=True)[0], 'Raw=0x666d005c6300')

    def test_missing_quantity(self):
        with self.assertRaises(ValueError):
            format_reading(ROOM, 'humidity')

    def test_unknown_mode(self):
        with self.assertRaises(ValueError):
            format_reading(ROOM, 'kelvin')


if __name__ == '__main__':
    unittest.main()
