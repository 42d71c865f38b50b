#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Command line front end. Reads one sensor once and prints the values.

Exit codes: 0 success, 1 usage or bus setup error, 2 acquisition error.
"""

import sys
import locale
import logging
import argparse
from typing import List, Optional, Union

from . import __version__
from .dispatch import ALTERNATE, ChipKind, acquire, open_transport
from .errors import SensorError
from .output import MODES, degree_suffix, format_reading
from .reading import Capability

_log = logging.getLogger(__name__)

EXIT_USAGE = 1


class ArgumentParser(argparse.ArgumentParser):
    """argparse exits with 2 on usage errors, that code is taken by acquisition errors."""
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, '{}: error: {}\n'.format(self.prog, message))


def address(text: str) -> Union[int, str]:
    """`alt` or an integer in any base notation"""
    if text == ALTERNATE:
        return text
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError('invalid address: {!r}'.format(text))


def build_parser(chip: Optional[ChipKind] = None, prog: str = None) -> ArgumentParser:
    """Argument parser, `chip` presets the sensor as the single purpose tools do."""
    parser = ArgumentParser(
        prog=prog,
        description='Gets air temperature in deg C (and humidity in %) from an I2C sensor.')
    parser.add_argument('-c', '--chip', choices=[kind.value for kind in ChipKind],
                        default=(chip or ChipKind.MCP9801).value, help='sensor chip (default: %(default)s)')
    parser.add_argument('-b', '--bare', action='store_true', help='bare format (displays temperature only)')
    parser.add_argument('-m', '--mode', choices=MODES, default='full', help='output mode (default: %(default)s)')
    parser.add_argument('-r', '--raw', action='store_true', help='print raw register value as well')
    parser.add_argument('--bus', default='1', help='I2C bus number or device path (default: %(default)s)')
    parser.add_argument('--address', type=address, default=None,
                        help="I2C device address or 'alt', the chip's default if not given")
    parser.add_argument('--soft-reset', action='store_true', help='AHT10: soft reset before calibration')
    parser.add_argument('--strict', action='store_true', help='AHT10: fail if the calibrate command fails')
    parser.add_argument('--repeatability', choices=('high', 'medium', 'low'), default='high',
                        help='SHT30: measurement repeatability (default: %(default)s)')
    parser.add_argument('--clock-stretching', action='store_true', help='SHT30: use clock stretching command')
    parser.add_argument('--crc', action='store_true', help='SHT30: verify data checksums')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug output')
    parser.add_argument('--version', action='version', version='%(prog)s ' + __version__)
    return parser


def driver_options(chip: ChipKind, args: argparse.Namespace) -> dict:
    if chip is ChipKind.AHT10:
        return dict(soft_reset=args.soft_reset, strict=args.strict)
    if chip is ChipKind.SHT30:
        return dict(repeatability=args.repeatability, clock_stretching=args.clock_stretching,
                    verify_crc=args.crc)
    return {}


def main(argv: List[str] = None, chip: Optional[ChipKind] = None, prog: str = None) -> int:
    parser = build_parser(chip, prog)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    chip = ChipKind.parse(args.chip)
    mode = 'temperature' if args.bare else args.mode
    if mode == 'humidity' and not Capability.HUMIDITY & chip.driver.capability:
        parser.error('{} does not measure humidity'.format(chip.value))

    bus = int(args.bus) if args.bus.isdigit() else args.bus
    try:
        with open_transport(chip, bus, args.address) as transport:
            reading = acquire(chip, transport, **driver_options(chip, args))
    except SensorError as exc:
        _log.debug('acquisition failed', exc_info=True)
        print('Error: {}'.format(exc.step), file=sys.stderr)
        return exc.exit_code

    try:
        locale.setlocale(locale.LC_CTYPE, '')
    except locale.Error as exc:
        _log.debug('locale not supported: %s', exc)

    for line in format_reading(reading, mode, args.raw, chip.driver.display_precision, degree_suffix()):
        print(line)
    return 0


def room_temp():
    sys.exit(main(chip=ChipKind.MCP9801, prog='room_temp'))


def temp_humid():
    sys.exit(main(chip=ChipKind.AHT10, prog='temp_humid'))


def temp_humid2():
    sys.exit(main(chip=ChipKind.SHT30, prog='temp_humid2'))


def run():
    sys.exit(main())
