"""
Command Line Entry Point
========================
Parses the command line, configures logging and runs one conversion.

Usage:
    $ csvtoply [OPTIONS]+ input.csv output.ply
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from csvtoply.config import APP_VERSION, ConversionOptions
from csvtoply.errors import CsvToPlyError
from csvtoply.logging_config import setup_logging, verbosity_level
from csvtoply.model.io import convert

logger = logging.getLogger(__name__)

PROG = "csvtoply"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


class UsageError(Exception):
    """Malformed or unknown command line option."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        usage=f"{PROG} [OPTIONS]+ input.csv output.ply",
        description="Converts a mesh CSV from PIX to a PLY mesh",
        add_help=False,
    )
    parser.add_argument("paths", nargs="*", metavar="input.csv output.ply", help=argparse.SUPPRESS)

    opts = parser.add_argument_group("Options")
    opts.add_argument("-ox", "--ox", "--offsetx", dest="offset_x", type=float, default=0.0,
                      metavar="VALUE", help="Offset to add to Position[0]")
    opts.add_argument("-oy", "--oy", "--offsety", dest="offset_y", type=float, default=0.0,
                      metavar="VALUE", help="Offset to add to Position[1]")
    opts.add_argument("-oz", "--oz", "--offsetz", dest="offset_z", type=float, default=0.0,
                      metavar="VALUE", help="Offset to add to Position[2]")
    opts.add_argument("-f", "--flipuv", dest="flip_uv", action="store_true", help="Flip UVs")
    opts.add_argument("--yup", dest="y_up", action="store_true",
                      help="Don't translate coordinates to Z Up")
    opts.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    opts.add_argument("--log-file", metavar="PATH", help="Also write the log to PATH")
    opts.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    opts.add_argument("-h", "--help", dest="show_help", action="store_true",
                      help="Show this message and exit")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_intermixed_args(argv)
    except UsageError as e:
        print(f"{PROG}: {e}")
        print(f"Try `{PROG} --help' for more information.")
        return EXIT_USAGE

    if args.show_help or len(args.paths) < 2:
        parser.print_help()
        return EXIT_OK

    setup_logging(level=verbosity_level(args.verbose), log_file=args.log_file)

    input_path, output_path = args.paths[:2]
    if len(args.paths) > 2:
        logger.warning(f"Ignoring extra arguments: {' '.join(args.paths[2:])}")

    options = ConversionOptions(
        offset_x=args.offset_x,
        offset_y=args.offset_y,
        offset_z=args.offset_z,
        flip_uv=args.flip_uv,
        y_up=args.y_up,
    )
    try:
        convert(input_path, output_path, options)
    except (CsvToPlyError, OSError) as e:
        logger.error(f"Conversion failed: {e}")
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
