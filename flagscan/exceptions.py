# Flagscan — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by Flagscan argument lookups.

Every malformed or missing command line value is reported as a `ParseError`
subclass. The lookup functions never catch these; an outer boundary
(see `flagscan.fatal`) decides whether to print the diagnostic and exit.

Exception Hierarchy:
- FlagscanError
    └── ParseError
        ├── MissingArgument
        ├── MissingRequiredValue
        ├── InvalidBooleanValue
        ├── InvalidIntegerValue
        ├── InvalidFloatValue
        ├── IntegerOutOfRange
        ├── FloatOutOfRange
        ├── UnrecognizedArgument
        └── UnrecognizedEnumValue
"""


class FlagscanError(Exception):
    """Base exception for the Flagscan package."""


class ParseError(FlagscanError):
    """
    Raised when a command line vector cannot satisfy a lookup.

    The message is the full human-readable diagnostic. `flag` holds the flag
    name being looked up, or the offending token for unrecognized arguments.
    """

    def __init__(self, message: str, flag: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.flag = flag


class MissingArgument(ParseError):
    """Exception raised when a required flag is absent."""


class MissingRequiredValue(ParseError):
    """Exception raised when a flag has no value and no usable default."""


class InvalidBooleanValue(ParseError):
    """Exception raised when a boolean flag is given a non-empty value."""


class InvalidIntegerValue(ParseError):
    """Exception raised when a value does not fully parse as a base-10 integer."""


class InvalidFloatValue(ParseError):
    """Exception raised when a value does not fully parse as a float."""


class IntegerOutOfRange(ParseError):
    """Exception raised when an integer value violates its bounds."""


class FloatOutOfRange(ParseError):
    """Exception raised when a float value violates its bounds or is NaN."""


class UnrecognizedArgument(ParseError):
    """Exception raised when a token matches none of the known flag names."""


class UnrecognizedEnumValue(ParseError):
    """Exception raised when an enum flag value is not one of the accepted values."""
