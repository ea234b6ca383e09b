"""The string-to-sum pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from string_calculator.delimiters import parse_delimiters
from string_calculator.exceptions import StringCalculatorError
from string_calculator.operations import (
    MAX_VALUE,
    clean_tokens,
    coerce_numbers,
    split_tokens,
    sum_within_bound,
)
from string_calculator.validators import validate_no_negatives

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of a single evaluation, either a value or an error message."""

    ok: bool
    value: int | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: int) -> CalculationResult:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> CalculationResult:
        return cls(ok=False, error=error)

    def __str__(self) -> str:
        return str(self.value) if self.ok else f"Error: {self.error}"


def compute(numbers: str, upper_bound: int = MAX_VALUE) -> int:
    """
    Sum the integers found in a delimited string.

    Default delimiters are comma and newline. A ``//`` prefix declares
    custom ones, either a single character (``//;\\n1;2``) or any number
    of bracketed strings (``//[***][%]\\n1***2%3``).

    Example:
        >>> compute("1,2\\n3")
        6
        >>> compute("//[***]\\n1***2***3")
        6
        >>> compute("2,1001")
        2

    Args:
        numbers: Raw input text
        upper_bound: Values greater than this are ignored

    Returns:
        Sum of all non-negative integers up to upper_bound

    Raises:
        MalformedDelimiterDeclaration: If the declaration has no newline
        NegativeNumberError: If any negative number is present
    """
    if numbers == "":
        return 0

    delimiters, body = parse_delimiters(numbers)
    tokens = clean_tokens(split_tokens(body, delimiters))
    values = validate_no_negatives(coerce_numbers(tokens))
    total = sum_within_bound(values, upper_bound)

    logger.debug("Summed %d values to %d", len(values), total)
    return total


def evaluate(numbers: str, upper_bound: int = MAX_VALUE) -> CalculationResult:
    """Run compute and report calculator errors as a failed result."""
    try:
        return CalculationResult.success(compute(numbers, upper_bound))
    except StringCalculatorError as e:
        logger.info("Rejected input: %s", e)
        return CalculationResult.failure(str(e))
