#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Aosong AHT10 humidity sensor.
"""

from roomtemp import AHT10, Transport


def example():
    with Transport(1, AHT10.default_addr) as bus:
        for soft_reset in (False, True):
            reading = AHT10(bus, soft_reset=soft_reset).read()
            print("-" * 79)
            print("Soft reset:     {}".format(soft_reset))
            print("Temperature:    {:.2f} C".format(reading.temperature))
            print("Humidity:       {:.1f} %".format(reading.humidity))


if __name__ == '__main__':
    example()
