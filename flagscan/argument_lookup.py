# Flagscan — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Stateless flag lookup and value validation over an `argv`-style vector.

Every function scans the vector from index 1 up to the flag boundary (the first
literal `--`, or the end of the vector). Index 0 is the program name and is never
considered a flag. Tokens at or after the boundary are positional passthrough and
invisible to every lookup.

A flag name matches a token when the token is exactly the name (bare flag) or
starts with `name=` (inline value). A bare flag takes the next token as its value
unless that token starts with `-` or there is no next token, in which case the
flag is present with an empty value.

Functions:
- flag_boundary: Index of the first `--` token.
- find_argument: Raw value lookup, `None` when absent.
- require_argument: Raw value lookup that fails when absent.
- check_unknown_arguments: Reject tokens that match no known flag.
- find_bool_argument / find_int_argument / find_float_argument / find_enum_argument:
  Typed lookups with default and range/membership validation.

All failures raise a `ParseError` subclass. Nothing is caught here; use
`flagscan.fatal` (or `ArgumentLookup(exit_on_error=True)`) at the program edge to
turn them into a diagnostic and a failing exit status.

Example Usage:
    args = ["prog", "--shots=10", "--out", "result.txt", "--", "--shots=99"]
    find_int_argument("--shots", 1, 1, 1000, args)  # 10
    find_argument("--out", args)                    # "result.txt"
"""
from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence, TypeVar

from flagscan.exceptions import (
    FloatOutOfRange,
    IntegerOutOfRange,
    InvalidBooleanValue,
    InvalidFloatValue,
    InvalidIntegerValue,
    MissingArgument,
    MissingRequiredValue,
    UnrecognizedArgument,
    UnrecognizedEnumValue,
)
from flagscan.fatal import exit_on_error
from flagscan.logger import logger

T = TypeVar("T")

FLAG_TERMINATOR = "--"
C_WHITESPACE = " \t\n\r\f\v"
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_INT_PATTERN = re.compile(r"\s*[+-]?[0-9]+", re.ASCII)
_DECIMAL_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", re.ASCII
)
_HEX_FLOAT_PATTERN = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?",
    re.ASCII,
)
_SPECIAL_FLOAT_PATTERN = re.compile(r"[+-]?(?:inf|infinity|nan)", re.ASCII | re.I)


def flag_boundary(args: Sequence[str]) -> int:
    """Return the index of the first `--` token after the program name, or `len(args)`."""
    for index in range(1, len(args)):
        if args[index] == FLAG_TERMINATOR:
            return index
    return max(len(args), 1)


def _match_flag(name: str, token: str) -> str | None:
    """
    Match a single token against a flag name.

    Returns:
        str | None: `None` when the token is not this flag, `""` for a bare match,
        or `"=value"` for an inline match.
    """
    if not token.startswith(name):
        return None
    rest = token[len(name) :]
    if rest == "" or rest.startswith("="):
        return rest
    return None


def _takes_next_token(index: int, args: Sequence[str]) -> bool:
    """Whether the token after `index` exists and counts as a value."""
    return index < len(args) - 1 and not args[index + 1].startswith("-")


def find_argument(name: str, args: Sequence[str]) -> str | None:
    """
    Find the raw value of a flag.

    Args:
        name (str): Flag name, including any leading dashes.
        args (Sequence[str]): Full argument vector, program name first.

    Returns:
        str | None: `None` if the flag is absent, `""` if present without a value,
        otherwise the inline or next-token value.
    """
    for index in range(1, flag_boundary(args)):
        rest = _match_flag(name, args[index])
        if rest is None:
            continue
        if rest:
            logger.debug("Flag '%s' found inline at index %d.", name, index)
            return rest[1:]
        if _takes_next_token(index, args):
            logger.debug(
                "Flag '%s' found at index %d with next-token value.", name, index
            )
            return args[index + 1]
        logger.debug("Flag '%s' found at index %d without a value.", name, index)
        return ""
    return None


def require_argument(name: str, args: Sequence[str]) -> str:
    """Find the raw value of a flag that must be present. An empty value is accepted."""
    result = find_argument(name, args)
    if result is None:
        raise MissingArgument(f"Missing command line argument: '{name}'", flag=name)
    return result


def check_unknown_arguments(
    known_names: Sequence[str], mode_label: str | None, args: Sequence[str]
) -> None:
    """
    Ensure every flag token before the boundary is one of `known_names`.

    A bare known flag followed by a non-dash token consumes that token as its value,
    so values are never mistaken for unrecognized flags.

    Raises:
        UnrecognizedArgument: On the first token that matches no known name.
    """
    index = 1
    while index < len(args):
        token = args[index]
        if token == FLAG_TERMINATOR:
            break

        matched = False
        for known in known_names:
            rest = _match_flag(known, token)
            if rest is None:
                continue
            if rest == "" and _takes_next_token(index, args):
                index += 1
            matched = True
            break

        if not matched:
            logger.debug("Rejecting unrecognized argument '%s'.", token)
            if mode_label is None:
                lines = [
                    f"Unrecognized command line argument {token}.",
                    "Recognized command line arguments:",
                ]
            else:
                lines = [
                    f"Unrecognized command line argument {token} for mode {mode_label}.",
                    f"Recognized command line arguments for mode {mode_label}:",
                ]
            lines.extend(f"    {known}" for known in known_names)
            raise UnrecognizedArgument("\n".join(lines), flag=token)
        index += 1


def find_bool_argument(name: str, args: Sequence[str]) -> bool:
    """Return `True` when the flag is present with no value, `False` when absent."""
    text = find_argument(name, args)
    if text is None:
        return False
    if text == "":
        return True
    raise InvalidBooleanValue(
        f"Got non-empty value '{text}' for boolean flag '{name}'.", flag=name
    )


def _parse_int(text: str) -> int | None:
    """Parse a base-10 integer; values too long to convert saturate like `strtol`."""
    if not _INT_PATTERN.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        return LONG_MIN if text.lstrip(C_WHITESPACE).startswith("-") else LONG_MAX


def find_int_argument(
    name: str, default: int, min_value: int, max_value: int, args: Sequence[str]
) -> int:
    """
    Find an integer flag value within `[min_value, max_value]`.

    An absent flag and a flag with an empty value both resolve to `default`. A
    default outside the bounds marks the flag as requiring an explicit value.
    """
    text = find_argument(name, args)
    if text is None or text == "":
        if default < min_value or default > max_value:
            raise MissingRequiredValue(
                f"Must specify a value for int flag '{name}'.", flag=name
            )
        return default

    value = _parse_int(text)
    if value is None:
        raise InvalidIntegerValue(
            f"Got non-integer value '{text}' for integer flag '{name}'.", flag=name
        )

    if value < min_value or value > max_value:
        raise IntegerOutOfRange(
            f"Integer value '{text}' for flag '{name}' doesn't satisfy "
            f"{min_value} <= {value} <= {max_value}.",
            flag=name,
        )
    return value


def _parse_float(text: str) -> float | None:
    """Parse the way C `strtof` accepts a whole string: leading whitespace only."""
    body = text.lstrip(C_WHITESPACE)
    if _DECIMAL_FLOAT_PATTERN.fullmatch(body) or _SPECIAL_FLOAT_PATTERN.fullmatch(body):
        return float(body)
    if _HEX_FLOAT_PATTERN.fullmatch(body):
        try:
            return float.fromhex(body)
        except OverflowError:
            return math.copysign(math.inf, -1.0 if body.startswith("-") else 1.0)
    return None


def find_float_argument(
    name: str,
    default: float,
    min_value: float,
    max_value: float,
    args: Sequence[str],
) -> float:
    """
    Find a float flag value within `[min_value, max_value]`; NaN is always rejected.

    Only an absent flag falls back to `default`. A present flag with an empty value
    is parsed like any other text and fails with `InvalidFloatValue`, unlike
    `find_int_argument`.
    """
    text = find_argument(name, args)
    if text is None:
        if default < min_value or default > max_value:
            raise MissingRequiredValue(
                f"Must specify a value for float flag '{name}'.", flag=name
            )
        return default

    value = _parse_float(text)
    if value is None:
        raise InvalidFloatValue(
            f"Got non-float value '{text}' for float flag '{name}'.", flag=name
        )

    if value < min_value or value > max_value or value != value:
        raise FloatOutOfRange(
            f"Float value '{text}' for flag '{name}' doesn't satisfy "
            f"{min_value:f} <= {value:f} <= {max_value:f}.",
            flag=name,
        )
    return value


def _recognized_values(known_values: Sequence[str], default_index: int) -> list[str]:
    lines = ["Recognized values are:"]
    for index, value in enumerate(known_values):
        suffix = " (default)" if index == default_index else ""
        lines.append(f"    '{value}'{suffix}")
    return lines


def find_enum_argument(
    name: str, default_index: int, known_values: Sequence[str], args: Sequence[str]
) -> int:
    """
    Find an enumerated flag value and return its index in `known_values`.

    Args:
        name (str): Flag name.
        default_index (int): Index returned when the flag is absent. Negative means
            the flag is required.
        known_values (Sequence[str]): Accepted values, matched exactly.
        args (Sequence[str]): Full argument vector.

    Raises:
        MissingRequiredValue: Absent flag with a negative default.
        UnrecognizedEnumValue: Value not in `known_values`.
    """
    text = find_argument(name, args)
    if text is None:
        if default_index >= 0:
            return default_index
        lines = [f"Must specify a value for enum flag '{name}'."]
        lines.extend(_recognized_values(known_values, default_index))
        raise MissingRequiredValue("\n".join(lines), flag=name)

    for index, value in enumerate(known_values):
        if text == value:
            return index

    lines = [f"Unrecognized value '{text}' for enum flag '{name}'."]
    lines.extend(_recognized_values(known_values, default_index))
    raise UnrecognizedEnumValue("\n".join(lines), flag=name)


@dataclass(frozen=True)
class ArgumentLookup:
    """
    Binds an immutable argument vector to the lookup functions.

    With `exit_on_error=True` every lookup runs inside the fatal boundary: a
    `ParseError` prints its diagnostic to stderr and exits the process with a
    failing status, so each call either returns a valid value or never returns.

    Example:
        lookup = ArgumentLookup.from_argv(exit_on_error=True)
        verbose = lookup.find_bool("--verbose")
        shots = lookup.find_int("--shots", 1, 1, 1000)
    """

    args: tuple[str, ...]
    exit_on_error: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def from_argv(
        cls, argv: Sequence[str] | None = None, exit_on_error: bool = False
    ) -> ArgumentLookup:
        return cls(tuple(sys.argv if argv is None else argv), exit_on_error)

    def _run(self, function: Callable[..., T], *params: Any) -> T:
        if not self.exit_on_error:
            return function(*params, self.args)
        with exit_on_error():
            return function(*params, self.args)

    @property
    def program(self) -> str:
        return self.args[0] if self.args else ""

    def boundary(self) -> int:
        return flag_boundary(self.args)

    def positional(self) -> tuple[str, ...]:
        """Tokens after the `--` marker."""
        return self.args[self.boundary() + 1 :]

    def find(self, name: str) -> str | None:
        return find_argument(name, self.args)

    def require(self, name: str) -> str:
        return self._run(require_argument, name)

    def check_unknown(
        self, known_names: Sequence[str], mode_label: str | None = None
    ) -> None:
        self._run(check_unknown_arguments, known_names, mode_label)

    def find_bool(self, name: str) -> bool:
        return self._run(find_bool_argument, name)

    def find_int(self, name: str, default: int, min_value: int, max_value: int) -> int:
        return self._run(find_int_argument, name, default, min_value, max_value)

    def find_float(
        self, name: str, default: float, min_value: float, max_value: float
    ) -> float:
        return self._run(find_float_argument, name, default, min_value, max_value)

    def find_enum(
        self, name: str, default_index: int, known_values: Sequence[str]
    ) -> int:
        return self._run(find_enum_argument, name, default_index, known_values)
