#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Text output of a reading.
"""

import locale
import codecs
import logging
from typing import List

from .reading import Capability, Reading

_log = logging.getLogger(__name__)

DEGREE_DEFAULT = "'C"
DEGREE = '°C'

MODES = ('full', 'temperature', 'humidity')


def degree_suffix(encoding: str = None) -> str:
    """Degree symbol and unit if the output encoding can represent it.

    :param encoding: output encoding, the locale's preferred one if None
    :return: `°C` or `'C` as fallback
    """
    if encoding is None:
        encoding = locale.getpreferredencoding(False)
    try:
        codecs.lookup(encoding)
        DEGREE.encode(encoding)
    except (LookupError, UnicodeEncodeError):
        _log.debug('no degree symbol in %s', encoding)
        return DEGREE_DEFAULT
    return DEGREE


def format_reading(reading: Reading, mode: str = 'full', raw: bool = False,
                   precision: int = 2, degree: str = DEGREE_DEFAULT) -> List[str]:
    """Output lines of a reading.

    :param reading: acquired values
    :param mode: full, temperature (bare) or humidity (bare)
    :param raw: prepend the raw register value
    :param precision: decimals of temperature in full mode
    :param degree: temperature unit label
    :raise ValueError: unknown mode or requested quantity not in reading
    """
    if mode not in MODES:
        raise ValueError('unknown output mode {!r}'.format(mode))

    lines = []
    if raw:
        lines.append('Raw=0x{}'.format(reading.raw.hex()))

    if mode == 'temperature':
        if not reading.has(Capability.TEMPERATURE):
            raise ValueError('no temperature available')
        lines.append('{:.2f}'.format(reading.temperature))
    elif mode == 'humidity':
        if not reading.has(Capability.HUMIDITY):
            raise ValueError('no humidity available')
        lines.append('{:.1f}'.format(reading.humidity))
    else:
        if reading.has(Capability.TEMPERATURE):
            lines.append('Temp={:.{}f}{}'.format(reading.temperature, precision, degree))
        if reading.has(Capability.HUMIDITY):
            lines.append('Humi={:.1f}%'.format(reading.humidity))
    return lines
