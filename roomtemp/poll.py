#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Bounded busy-wait on a device status flag.

The loop is bounded by a retry count, not by elapsed time. A failing status
probe counts as busy, so a flaky bus never reports a device as ready.
"""

import enum
import time
import logging
import unittest
from typing import Callable, Union

_log = logging.getLogger(__name__)


class Status(enum.Enum):
    """Result of one status probe."""
    READY = 'ready'
    BUSY = 'busy'
    PROBE_FAILED = 'probe failed'


class PollOutcome(enum.Enum):
    READY = 'ready'
    TIMED_OUT = 'timed out'


def is_busy(status: Union[Status, bool]) -> bool:
    """Map a probe result to busy/not busy. `PROBE_FAILED` is busy."""
    if isinstance(status, Status):
        return status is not Status.READY
    return bool(status)


def status_probe(transport, busy_mask: int) -> Callable[[], Status]:
    """Build a probe reading the status byte of `transport`.

    :param transport: bus transport offering `read_byte()`
    :param busy_mask: status bit(s) meaning busy
    """
    def probe() -> Status:
        try:
            status = transport.read_byte()
        except OSError as exc:
            _log.debug('status probe failed: %s', exc)
            return Status.PROBE_FAILED
        _log.debug('status: 0x%02X', status)
        return Status.BUSY if status & busy_mask else Status.READY
    return probe


def poll(status_fn: Callable[[], Union[Status, bool]], delay_ms: float, max_retries: int) -> PollOutcome:
    """Wait until `status_fn` reports ready.

    :param status_fn: probe returning a :class:`Status` or a bool meaning `still busy`
    :param delay_ms: sleep between two probes in milliseconds
    :param max_retries: timeout once more than this many busy results were seen
    :return: READY or TIMED_OUT
    """
    retries = 0
    while is_busy(status_fn()):
        time.sleep(delay_ms / 1000.0)
        _log.debug('busy wait... %d', retries)
        retries += 1
        if retries > max_retries:
            return PollOutcome.TIMED_OUT
    return PollOutcome.READY


class TestMethods(unittest.TestCase):
    """Very basic unittest"""
    def setUp(self):
        logging.basicConfig(level=logging.INFO)

    def test_probe_failure_is_busy(self):
        self.assertTrue(is_busy(Status.PROBE_FAILED))
        self.assertTrue(is_busy(Status.BUSY))
        self.assertFalse(is_busy(Status.READY))
