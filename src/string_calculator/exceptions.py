"""Custom exceptions for the string calculator."""

from collections.abc import Iterable
from typing import Any

from string_calculator.integers import format_integer


class StringCalculatorError(Exception):
    """Base exception for all string calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class MalformedDelimiterDeclaration(StringCalculatorError):
    """Raised when a ``//`` delimiter declaration has no terminating newline."""

    def __init__(self, declaration: str) -> None:
        super().__init__("Invalid delimiter format", repr(declaration))
        self.declaration = declaration


class NegativeNumberError(StringCalculatorError):
    """Raised when the input contains one or more negative numbers."""

    def __init__(self, negatives: Iterable[int]) -> None:
        self.negatives = tuple(negatives)
        super().__init__(f"negatives not allowed {', '.join(map(format_integer, self.negatives))}")
