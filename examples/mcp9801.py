#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Microchip MCP9801 room temperature sensor.
"""

from roomtemp import MCP9801, Transport


def example():
    with Transport(1, MCP9801.default_addr) as bus:
        reading = MCP9801(bus).read()
        print("Raw:            0x{}".format(reading.raw.hex()))
        print("Temperature:    {:.1f} C".format(reading.temperature))


if __name__ == '__main__':
    example()
