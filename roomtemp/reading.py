#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Normalized result of one acquisition.
"""

import enum
import math
import collections
from typing import Optional


class Capability(enum.IntFlag):
    """Physical quantities produced by an acquisition."""
    NONE = 0
    TEMPERATURE = 1
    HUMIDITY = 2


class Reading(collections.namedtuple('Reading', ('temperature', 'humidity', 'capability', 'raw'))):
    """temperature in centigrade, humidity in %RH, which of both are present and the raw bytes read."""
    __slots__ = ()

    @classmethod
    def create(cls, temperature: Optional[float] = None, humidity: Optional[float] = None,
               raw: bytes = b'') -> 'Reading':
        """Build a reading whose capability matches the values given.

        :raise ValueError: a value is given but not finite
        """
        capability = Capability.NONE
        for value, flag in ((temperature, Capability.TEMPERATURE), (humidity, Capability.HUMIDITY)):
            if value is None:
                continue
            if not math.isfinite(value):
                raise ValueError('{} is not a finite value: {!r}'.format(flag.name.lower(), value))
            capability |= flag
        return cls(temperature, humidity, capability, bytes(raw))

    def has(self, capability: Capability) -> bool:
        return capability in self.capability
