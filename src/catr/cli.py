# src/catr/cli.py
import argparse
import logging
import os
import sys

from catr.config import (
    DEFAULT_LOG_LEVEL,
    DESCRIPTION,
    LOG_FORMAT,
    LOG_LEVEL_ENV,
    PROG_NAME,
    VERSION,
)
from catr.core.runner import run
from catr.errors import ConfigurationError
from catr.models import CatConfig


class CatArgumentParser(argparse.ArgumentParser):
    """argparse, but a bad invocation exits with 1 instead of 2."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def create_arg_parser():
    parser = CatArgumentParser(prog=PROG_NAME, description=DESCRIPTION)
    parser.add_argument(
        "files",
        metavar="FILE",
        nargs="*",
        help="Input file(s); '-' or nothing reads standard input",
    )
    parser.add_argument("-n", "--number", dest="number_all", action="store_true", help="Number all output lines")
    parser.add_argument(
        "-b", "--number-nonblank",
        dest="number_nonblank",
        action="store_true",
        help="Number non-blank output lines (overrides -n)",
    )
    parser.add_argument("--version", action="version", version=f"{PROG_NAME} {VERSION}")
    return parser


def get_config(argv=None) -> CatConfig:
    """Parses the command line into a CatConfig."""
    # Flags may sit between files, e.g. `catr a.txt -n b.txt`
    args = create_arg_parser().parse_intermixed_args(argv)
    return CatConfig.build(args.files, number_all=args.number_all, number_nonblank=args.number_nonblank)


def setup_logging():
    level_name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _silence_stdout():
    # Output pipe went away (e.g. `catr big.txt | head`); stop writing quietly
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        pass
    finally:
        os.close(devnull)


def main():
    setup_logging()
    try:
        try:
            config = get_config()
        except ConfigurationError as e:
            print(f"{PROG_NAME}: {e}", file=sys.stderr)
            sys.exit(1)

        run(config)

    except BrokenPipeError:
        _silence_stdout()

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
