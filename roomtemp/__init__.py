#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Temperature and humidity sensors on the I2C bus, read once.
"""

__version__ = '0.1.0'

from .errors import (SensorError, BusSetupError, AcquisitionError, RegisterReadError, ResetSendError,
                     ResetTimeoutError, CalibrateSendError, CalibrateTimeoutError, CalibrationFailedError,
                     TriggerSendError, TriggerTimeoutError, BlockReadError, MeasureSendError, ChecksumError)
from .reading import Capability, Reading
from .poll import PollOutcome, Status
from .bus import Transport

# temperature
from .mcp9801 import MCP9801
# humidity / temperature
from .aht10 import AHT10
from .sht30 import SHT30

from .dispatch import ChipKind, acquire, open_transport
