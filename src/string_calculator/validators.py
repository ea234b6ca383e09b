"""Token and value validation."""

import re
from collections.abc import Iterable

from string_calculator.exceptions import NegativeNumberError

# Optional sign followed by ASCII digits, anchored at the token start
_INTEGER_PREFIX = re.compile(r"[+-]?[0-9]+")


def integer_prefix(token: str) -> str | None:
    """
    Return the leading base-10 integer literal of a cleaned token.

    Trailing text after the digits is ignored, so ``"2.5"`` gives ``"2"``
    and ``"-5abc"`` gives ``"-5"``. Non-ASCII digits never match.

    Args:
        token: A whitespace-stripped token

    Returns:
        The matched literal, or None if the token does not start with one
    """
    match = _INTEGER_PREFIX.match(token)
    return match.group() if match else None


def is_integer_token(token: str) -> bool:
    """Check whether a cleaned token starts with an integer literal."""
    return integer_prefix(token) is not None


def validate_no_negatives(values: Iterable[int]) -> list[int]:
    """
    Validate that no value is negative.

    Every negative is collected before raising, in order of appearance.

    Args:
        values: Parsed integers

    Returns:
        The values as a list

    Raises:
        NegativeNumberError: If any value is below zero
    """
    values = list(values)
    negatives = [value for value in values if value < 0]

    if negatives:
        raise NegativeNumberError(negatives)

    return values
