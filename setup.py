#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup

_package = 'roomtemp'


LONG_DESCRIPTION = """
Reads room temperature and humidity from MCP9801, AHT10 and SHT30 sensors
attached to the I2C bus of a Raspberry Pi.
"""

setup(name=_package,
    version='0.1.0',
    description='Room temperature and humidity from I2C sensor chips',
    long_description=LONG_DESCRIPTION,
    license='MIT',
    python_requires='>=3.6',

    install_requires = [
        'smbus2',
        ],

    packages=[_package],

    entry_points={
        'console_scripts': [
            'roomtemp = roomtemp.cli:run',
            'room_temp = roomtemp.cli:room_temp',
            'temp_humid = roomtemp.cli:temp_humid',
            'temp_humid2 = roomtemp.cli:temp_humid2',
            ],
        },
    )
