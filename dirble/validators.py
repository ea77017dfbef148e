"""Per-flag value validators.

Each validator takes the raw string bound to a flag and returns the typed
value, or raises the matching error. They never substitute defaults.
"""
import re

from dirble.errors import InvalidNumericArgument, InvalidTargetScheme, MissingValue

ALLOWED_SCHEMES = ("http://", "https://")
U32_MAX = 4294967295

_DIGITS = re.compile(r"[0-9]+")


def starts_with_http(value: str, flag: str = "target") -> str:
    """Accept only URIs that begin with http:// or https://."""
    if value.startswith(ALLOWED_SCHEMES):
        return value
    raise InvalidTargetScheme(value)


def positive_integer(value: str, flag: str) -> int:
    """Parse an unsigned base-10 integer and accept it only when > 0."""
    if not _DIGITS.fullmatch(value):
        raise InvalidNumericArgument(flag, value)
    number = int(value)
    if number <= 0 or number > U32_MAX:
        raise InvalidNumericArgument(flag, value)
    return number


def non_empty(value: str, flag: str) -> str:
    if not value:
        raise MissingValue(flag)
    return value
