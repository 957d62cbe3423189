"""
Flagscan

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Command line front end for inspecting how Flagscan reads an argument vector.

The tool's own options come before the first `--`; everything after it is the
target vector, looked up as if it had been passed to a program named `flagscan`.
"""
from __future__ import annotations

import logging
import sys
from typing import Sequence

from flagscan.argument_lookup import (
    ArgumentLookup,
    check_unknown_arguments,
    find_argument,
    find_bool_argument,
    find_enum_argument,
    find_float_argument,
    find_int_argument,
    require_argument,
)
from flagscan.console import console
from flagscan.fatal import fatal
from flagscan.logger import logger
from flagscan.utils import get_program_invocation, setup_logging, split_list
from flagscan.version import __version__

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

LOOKUP_TYPES = ["raw", "require", "bool", "int", "float", "enum"]

KNOWN_FLAGS = [
    "--get",
    "--type",
    "--default",
    "--min",
    "--max",
    "--choices",
    "--known",
    "--mode",
    "--check",
    "--verbose",
    "--json-logs",
    "--help",
    "--version",
]

USAGE = """\
usage: {program} --get=NAME [--type=raw|require|bool|int|float|enum]
           [--default=V] [--min=V] [--max=V] [--choices=a,b,c]
           [--known=a,b,c] [--mode=LABEL] [--verbose] [--json-logs] -- [ARG ...]
       {program} --check --known=a,b,c [--mode=LABEL] -- [ARG ...]
       {program} --help | --version

Look up flag NAME in the ARG vector that follows `--` and print its value.
With --known, the ARG vector is first validated against the listed flag names.
"""


def _lookup(
    cli: ArgumentLookup, target: tuple[str, ...], name: str
) -> tuple[str | None, int]:
    """Run the requested lookup and return `(text to print, exit status)`."""
    lookup_type = LOOKUP_TYPES[cli.find_enum("--type", 0, LOOKUP_TYPES)]
    logger.debug("Looking up '%s' as %s in %s", name, lookup_type, target)

    if lookup_type == "raw":
        value = find_argument(name, target)
        return value, 0 if value is not None else 1

    if lookup_type == "require":
        return require_argument(name, target), 0

    if lookup_type == "bool":
        return ("true" if find_bool_argument(name, target) else "false"), 0

    if lookup_type == "int":
        default = cli.find_int("--default", 0, INT_MIN, INT_MAX)
        min_value = cli.find_int("--min", INT_MIN, INT_MIN, INT_MAX)
        max_value = cli.find_int("--max", INT_MAX, INT_MIN, INT_MAX)
        return str(find_int_argument(name, default, min_value, max_value, target)), 0

    if lookup_type == "float":
        inf = float("inf")
        default_float = cli.find_float("--default", 0.0, -inf, inf)
        min_float = cli.find_float("--min", -inf, -inf, inf)
        max_float = cli.find_float("--max", inf, -inf, inf)
        value = find_float_argument(name, default_float, min_float, max_float, target)
        return str(value), 0

    choices = split_list(cli.require("--choices"))
    default_index = cli.find_int("--default", -1, -1, len(choices) - 1)
    index = find_enum_argument(name, default_index, choices, target)
    return f"{index} {choices[index]}", 0


@fatal
def run(argv: Sequence[str]) -> int:
    cli = ArgumentLookup.from_argv(argv)
    cli.check_unknown(KNOWN_FLAGS)

    if cli.find_bool("--help"):
        console.print(
            USAGE.format(program=get_program_invocation()), markup=False, soft_wrap=True
        )
        return 0

    if cli.find_bool("--version"):
        console.out(f"flagscan v{__version__}", highlight=False)
        return 0

    verbose = cli.find_bool("--verbose")
    setup_logging(
        mode="json" if cli.find_bool("--json-logs") else None,
        console_log_level=logging.DEBUG if verbose else logging.WARNING,
    )

    target = ("flagscan", *cli.positional())
    mode_label = cli.find("--mode") or None

    if cli.find_bool("--check"):
        known = split_list(cli.require("--known"))
        check_unknown_arguments(known, mode_label, target)
        console.out("ok", highlight=False)
        return 0

    name = cli.require("--get")
    known = split_list(cli.find("--known"))
    if known:
        check_unknown_arguments(known, mode_label, target)

    text, status = _lookup(cli, target, name)
    if text is not None:
        console.out(text, highlight=False)
    return status


def main(argv: Sequence[str] | None = None) -> int:
    return run(sys.argv if argv is None else argv)


if __name__ == "__main__":
    sys.exit(main())
