"""Mutable front-end state wrapped around the pure calculator."""

from __future__ import annotations

from string_calculator.core import CalculationResult, evaluate
from string_calculator.operations import MAX_VALUE
from string_calculator.samples import get_sample


class CalculatorSession:
    """
    Input, result and error fields for a display layer.

    The calculator itself keeps no state; this class is the single place
    a UI or REPL stores what the user typed and what came back.

    Example:
        >>> session = CalculatorSession()
        >>> session.set_input("1,-2")
        >>> session.calculate().ok
        False
        >>> session.error
        'negatives not allowed -2'
    """

    def __init__(self, upper_bound: int = MAX_VALUE) -> None:
        self.upper_bound = upper_bound
        self.input = ""
        self.result: int | None = None
        self.error = ""

    def set_input(self, value: str) -> None:
        """Replace the pending input text."""
        self.input = value

    def load_sample(self, label: str) -> None:
        """
        Set the input to a named sample.

        Raises:
            KeyError: If no sample has that label
        """
        self.set_input(get_sample(label))

    def calculate(self) -> CalculationResult:
        """Evaluate the current input and store its value or error."""
        self.error = ""
        outcome = evaluate(self.input, self.upper_bound)
        if outcome.ok:
            self.result = outcome.value
        else:
            self.error = outcome.error or ""
            self.result = None
        return outcome

    def clear(self) -> None:
        """Reset input, result and error."""
        self.input = ""
        self.result = None
        self.error = ""

    def __repr__(self) -> str:
        return f"CalculatorSession(input={self.input!r}, result={self.result!r}, error={self.error!r})"
