#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Any supported chip through the dispatcher.
"""

import sys

from roomtemp import ChipKind, acquire, open_transport


def example(name='mcp9801'):
    chip = ChipKind.parse(name)
    with open_transport(chip) as bus:
        print(acquire(chip, bus))


if __name__ == '__main__':
    example(*sys.argv[1:2])
