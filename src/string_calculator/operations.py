"""Tokenisation, coercion and aggregation steps of the calculator pipeline."""

import logging
from collections.abc import Iterable

from string_calculator.delimiters import DelimiterSet
from string_calculator.integers import parse_integer
from string_calculator.validators import integer_prefix

logger = logging.getLogger(__name__)

# Values above this are left out of the sum
MAX_VALUE = 1000


def split_tokens(body: str, delimiters: DelimiterSet) -> list[str]:
    """
    Split the numeric body on any member of the delimiter set.

    Properties:
        - Literal: delimiter text is never interpreted as a pattern
        - Non-merging: adjacent delimiters yield an empty token between them

    Args:
        body: Numeric body of the input
        delimiters: Separators to split on

    Returns:
        Raw tokens, possibly empty or padded with whitespace
    """
    return delimiters.pattern.split(body)


def clean_tokens(tokens: Iterable[str]) -> list[str]:
    """Strip surrounding whitespace and drop tokens left empty."""
    return [stripped for stripped in (token.strip() for token in tokens) if stripped]


def coerce_numbers(tokens: Iterable[str]) -> list[int]:
    """
    Parse cleaned tokens as integers, keeping input order.

    Each token contributes its leading integer literal, so ``"2.5"`` counts
    as 2. Tokens that do not start with one are dropped without error.
    Digit runs of any length are accepted.

    Args:
        tokens: Cleaned tokens

    Returns:
        Parsed integers
    """
    numbers = []
    for token in tokens:
        literal = integer_prefix(token)
        if literal is None:
            logger.debug("Dropping non-numeric token %r", token)
            continue
        numbers.append(parse_integer(literal))
    return numbers


def sum_within_bound(values: Iterable[int], upper_bound: int = MAX_VALUE) -> int:
    """
    Sum the values that do not exceed the upper bound.

    Properties:
        - Commutative: order of values never changes the result
        - Empty: no values (or none within bound) sums to 0
        - Bound inclusive: a value equal to upper_bound is counted

    Args:
        values: Non-negative integers
        upper_bound: Largest value that still counts

    Returns:
        Sum of values <= upper_bound
    """
    return sum(value for value in values if value <= upper_bound)
