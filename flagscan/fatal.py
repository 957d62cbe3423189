# Flagscan — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Process boundary for Flagscan parse errors.

Lookups raise `ParseError`; this module is where a command line program turns one
into a red diagnostic on stderr and a failing exit status.

Typical Usage:
    with exit_on_error():
        shots = find_int_argument("--shots", 1, 1, 1000, sys.argv)

    @fatal
    def main() -> None:
        ...
"""
from __future__ import annotations

import functools
import sys
from contextlib import contextmanager
from typing import Any, Callable, Iterator, TypeVar

from rich.markup import escape

from flagscan.console import error_console
from flagscan.exceptions import ParseError
from flagscan.logger import logger

T = TypeVar("T")

EXIT_FAILURE = 1


def report_error(error: ParseError) -> None:
    """Print a parse error diagnostic to stderr."""
    logger.debug("%s for flag %r: %s", type(error).__name__, error.flag, error.message)
    error_console.print(f"[red]{escape(error.message)}[/]", soft_wrap=True)


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Report any `ParseError` raised in the block and exit with `EXIT_FAILURE`."""
    try:
        yield
    except ParseError as error:
        report_error(error)
        sys.exit(EXIT_FAILURE)


def fatal(function: Callable[..., T]) -> Callable[..., T]:
    """Decorator that runs `function` inside `exit_on_error`."""

    @functools.wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        with exit_on_error():
            return function(*args, **kwargs)

    return wrapper
