"""
File: ./forwarded/__main__.py
Author: Vítor Vasconcellos (vasconcellos.dev@gmail.com)
Project: forwarded

Copyright © 2021-2021 Vítor Vasconcellos
This program is free software; you can redistribute it and/or modify it under the terms of the GNU General Public License as published by the Free Software Foundation; either version 2 of the License, or (at your option) any later version.
This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
You should have received a copy of the GNU General Public License along with this program; if not, write to the Free Software Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301, USA.
"""

# Internal
import os
import sys
from typing import Any, List, Mapping, NoReturn, Optional, Sequence
from logging import INFO, WARN, DEBUG
from argparse import ArgumentError

# External
import orjson
from tap import Tap

from forwarded import ForwardedError, __summary__, __version__, parse
from forwarded.logger import get_logger, set_level

logger = get_logger(__name__)

_ENVIRON_PREFIX = "FORWARDED_"
_ENVIRON_FLAGS = ("first", "pretty")
_TRUTHY = ("1", "true", "yes", "on")


class ArgumentParser(Tap):
    header: Optional[str] = None
    """Forwarded header value, read from stdin when omitted"""
    verbose: int = 0  # Verbosity level, Maximum is -vv
    first: bool = False  # Only output the first forwarded element
    pretty: bool = False  # Indent JSON output

    def configure(self) -> None:
        self.add_argument("header", nargs="?")
        self.add_argument("--verbose", "-v", action="count")
        self.add_argument("--version", action="version", version=f"%(prog)s {__version__}")


def _environ_args(environ: Mapping[str, str]) -> List[str]:
    """Translate FORWARDED_* environment variables into command line arguments

    Args:
        environ: Process environment

    Returns:
        Arguments to be placed before the ones given by the user

    """
    args: List[str] = []

    for flag in _ENVIRON_FLAGS:
        if environ.get(f"{_ENVIRON_PREFIX}{flag.upper()}", "").strip().lower() in _TRUTHY:
            args.append(f"--{flag}")

    verbose = environ.get(f"{_ENVIRON_PREFIX}VERBOSE", "").strip()
    if verbose.isdigit():
        args.extend(["-v"] * min(int(verbose), 2))

    return args


def _read_header(header: Optional[str]) -> str:
    if header is not None:
        return header

    # Each line is treated as a separate Forwarded field, which HTTP combines with commas
    return ",".join(line.strip() for line in sys.stdin if line.strip())


def main(raw_args: Sequence[str] = sys.argv[1:]) -> NoReturn:
    arg_parser = ArgumentParser(underscores_to_dashes=True, description=__summary__)

    try:
        args = arg_parser.parse_args([*_environ_args(os.environ), *raw_args])
    except ArgumentError as exc:
        print(exc.message, file=sys.stderr)
        arg_parser.print_usage()
        sys.exit(1)

    # Set logger lever according to user choise, default is WARN
    verbose = args.verbose or 0
    set_level(DEBUG if verbose >= 2 else (INFO if verbose == 1 else WARN))

    header = _read_header(args.header)
    logger.info("Parsing Forwarded header: %s", header)

    try:
        forwarded = parse(header)
    except ForwardedError as exc:
        logger.debug("Invalid Forwarded header", exc_info=exc)
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    output: Any
    if args.first:
        output = forwarded.first.to_dict() if forwarded.first is not None else None
    else:
        output = forwarded.to_list()

    sys.stdout.write(
        orjson.dumps(output, option=orjson.OPT_INDENT_2 if args.pretty else 0).decode("utf-8")
        + "\n"
    )
    sys.stdout.flush()

    sys.exit(0)


if __name__ == "__main__":
    main()
