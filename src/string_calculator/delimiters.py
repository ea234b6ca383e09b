"""Delimiter declaration parsing."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from string_calculator.exceptions import MalformedDelimiterDeclaration

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

DECLARATION_PREFIX = "//"
NEWLINE = "\n"
DEFAULT_DELIMITERS = (",", NEWLINE)

# One bracketed group, e.g. "[***]"
_BRACKETED = re.compile(r"\[([^\]]+)\]")


@dataclass(frozen=True)
class DelimiterSet:
    """Ordered, non-empty collection of literal separators."""

    delimiters: tuple[str, ...] = DEFAULT_DELIMITERS

    def __post_init__(self) -> None:
        if not self.delimiters:
            raise ValueError("DelimiterSet requires at least one delimiter")

    @classmethod
    def custom(cls, *delimiters: str) -> DelimiterSet:
        """Build a set from declared delimiters, newline always appended."""
        return cls((*delimiters, NEWLINE))

    def __iter__(self) -> Iterator[str]:
        return iter(self.delimiters)

    def __len__(self) -> int:
        return len(self.delimiters)

    def __contains__(self, item: object) -> bool:
        return item in self.delimiters

    @property
    def pattern(self) -> re.Pattern[str]:
        """Alternation matching any member literally."""
        return re.compile("|".join(map(re.escape, self.delimiters)))


def parse_bracketed(declaration: str) -> list[str]:
    """
    Extract every ``[<delimiter>]`` group from a declaration section.

    Example:
        >>> parse_bracketed("[*][%%]")
        ['*', '%%']
    """
    return _BRACKETED.findall(declaration)


def parse_delimiters(numbers: str) -> tuple[DelimiterSet, str]:
    """
    Split raw input into its delimiter set and numeric body.

    Args:
        numbers: Raw calculator input

    Returns:
        Tuple of the resolved DelimiterSet and the numeric body

    Raises:
        MalformedDelimiterDeclaration: If a ``//`` prefix is not
            terminated by a newline
    """
    if not numbers.startswith(DECLARATION_PREFIX):
        return DelimiterSet(), numbers

    end = numbers.find(NEWLINE)
    if end == -1:
        raise MalformedDelimiterDeclaration(numbers[len(DECLARATION_PREFIX) :])

    declaration = numbers[len(DECLARATION_PREFIX) : end]
    body = numbers[end + 1 :]

    if len(declaration) == 1:
        delimiter_set = DelimiterSet.custom(declaration)
    else:
        bracketed = parse_bracketed(declaration)
        if not bracketed:
            logger.warning(
                "Delimiter declaration %r has no bracketed groups; only newline separates",
                declaration,
            )
        delimiter_set = DelimiterSet.custom(*bracketed)

    logger.debug("Resolved delimiters %r", delimiter_set.delimiters)
    return delimiter_set, body
