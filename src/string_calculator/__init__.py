"""
String calculator: sum the integers in a delimited string.

Supports default comma/newline delimiters, custom single-character and
bracketed multi-character delimiters, negative-number rejection and
exclusion of values above 1000.
"""

from string_calculator.core import CalculationResult, compute, evaluate
from string_calculator.delimiters import DelimiterSet, parse_bracketed, parse_delimiters
from string_calculator.exceptions import (
    MalformedDelimiterDeclaration,
    NegativeNumberError,
    StringCalculatorError,
)
from string_calculator.integers import format_integer, parse_integer
from string_calculator.operations import (
    MAX_VALUE,
    clean_tokens,
    coerce_numbers,
    split_tokens,
    sum_within_bound,
)
from string_calculator.samples import SAMPLE_INPUTS, get_sample
from string_calculator.session import CalculatorSession
from string_calculator.validators import integer_prefix, is_integer_token, validate_no_negatives

__all__ = [
    "MAX_VALUE",
    "SAMPLE_INPUTS",
    "CalculationResult",
    "CalculatorSession",
    "DelimiterSet",
    "MalformedDelimiterDeclaration",
    "NegativeNumberError",
    "StringCalculatorError",
    "clean_tokens",
    "coerce_numbers",
    "compute",
    "evaluate",
    "format_integer",
    "get_sample",
    "integer_prefix",
    "is_integer_token",
    "parse_bracketed",
    "parse_delimiters",
    "parse_integer",
    "split_tokens",
    "sum_within_bound",
    "validate_no_negatives",
]

__version__ = "0.1.0"
