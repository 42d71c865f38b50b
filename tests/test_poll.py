#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import unittest
from unittest import mock

from roomtemp.poll import PollOutcome, Status, poll, status_probe
from .fakebus import FakeBus


def sequence(*results):
    return iter(results).__next__


@mock.patch('time.sleep')
class TestPoll(unittest.TestCase):

    def test_ready_immediately(self, sleep):
        self.assertIs(poll(sequence(Status.READY), 10, 20), PollOutcome.READY)
        sleep.assert_not_called()

    def test_busy_max_retries_then_ready(self, sleep):
        status_fn = sequence(*([True] * 5 + [False]))
        self.assertIs(poll(status_fn, 10, 5), PollOutcome.READY)
        self.assertEqual(sleep.call_count, 5)
        sleep.assert_called_with(0.01)

    def test_busy_one_more_than_max_retries(self, sleep):
        status_fn = sequence(*([True] * 6 + [False]))
        self.assertIs(poll(status_fn, 10, 5), PollOutcome.TIMED_OUT)
        self.assertEqual(sleep.call_count, 6)

    def test_zero_retries(self, sleep):
        self.assertIs(poll(sequence(Status.BUSY, Status.READY), 10, 0), PollOutcome.TIMED_OUT)

    def test_probe_failure_keeps_polling(self, sleep):
        status_fn = sequence(Status.PROBE_FAILED, Status.PROBE_FAILED, Status.READY)
        self.assertIs(poll(status_fn, 20, 20), PollOutcome.READY)
        self.assertEqual(sleep.call_count, 2)


class TestStatusProbe(unittest.TestCase):

    def test_mapping(self):
        bus = FakeBus(status=[0x88, OSError(121, 'Remote I/O error'), 0x08])
        probe = status_probe(bus, 0x80)
        self.assertIs(probe(), Status.BUSY)
        self.assertIs(probe(), Status.PROBE_FAILED)
        self.assertIs(probe(), Status.READY)
        self.assertEqual(bus.names(), ['read_byte'] * 3)

    @mock.patch('time.sleep')
    def test_failing_bus_times_out(self, sleep):
        bus = FakeBus(status=[OSError(121, 'Remote I/O error')])
        self.assertIs(poll(status_probe(bus, 0x80), 10, 20), PollOutcome.TIMED_OUT)
        self.assertEqual(len(bus.calls), 21)


if __name__ == '__main__':
    unittest.main()
