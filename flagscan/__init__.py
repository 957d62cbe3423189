"""
Flagscan

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument_lookup import (
    ArgumentLookup,
    check_unknown_arguments,
    find_argument,
    find_bool_argument,
    find_enum_argument,
    find_float_argument,
    find_int_argument,
    flag_boundary,
    require_argument,
)
from .exceptions import FlagscanError, ParseError
from .fatal import exit_on_error, fatal
from .logger import logger
from .version import __version__

__all__ = [
    "ArgumentLookup",
    "FlagscanError",
    "ParseError",
    "check_unknown_arguments",
    "exit_on_error",
    "fatal",
    "find_argument",
    "find_bool_argument",
    "find_enum_argument",
    "find_float_argument",
    "find_int_argument",
    "flag_boundary",
    "logger",
    "require_argument",
    "__version__",
]
