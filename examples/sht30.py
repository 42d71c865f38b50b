#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Sensirion SHT30 humidity sensor.
"""

from roomtemp import SHT30, Transport


def example():
    with Transport(1, SHT30.default_addr) as bus:
        for repeatability in ('low', 'medium', 'high'):
            reading = SHT30(bus, repeatability=repeatability, verify_crc=True).read()
            print("-" * 79)
            print("Repeatability:  {}".format(repeatability))
            print("Temperature:    {:.2f} C".format(reading.temperature))
            print("Humidity:       {:.1f} %".format(reading.humidity))


if __name__ == '__main__':
    example()
