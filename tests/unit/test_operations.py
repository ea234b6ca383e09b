"""Unit tests for the pipeline steps."""

from string_calculator import (
    MAX_VALUE,
    DelimiterSet,
    clean_tokens,
    coerce_numbers,
    split_tokens,
    sum_within_bound,
)


class TestSplitTokens:
    """Tests for split_tokens."""

    def test_default_delimiters(self):
        assert split_tokens("1,2\n3", DelimiterSet()) == ["1", "2", "3"]

    def test_adjacent_delimiters_yield_empty_tokens(self):
        assert split_tokens("1,,3", DelimiterSet()) == ["1", "", "3"]

    def test_only_delimiters(self):
        assert split_tokens(",,,", DelimiterSet()) == ["", "", "", ""]

    def test_regex_metacharacters_are_literal(self):
        delimiters = DelimiterSet.custom("***")
        assert split_tokens("1***2***3", delimiters) == ["1", "2", "3"]

    def test_partial_delimiter_does_not_split(self):
        delimiters = DelimiterSet.custom("***")
        assert split_tokens("1**2", delimiters) == ["1**2"]

    def test_keeps_whitespace(self):
        assert split_tokens(" 1 , 2 ", DelimiterSet()) == [" 1 ", " 2 "]


class TestCleanTokens:
    """Tests for clean_tokens."""

    def test_strips_whitespace(self):
        assert clean_tokens([" 1 ", "\t2", "3 "]) == ["1", "2", "3"]

    def test_drops_empty_and_blank(self):
        assert clean_tokens(["", "  ", "4"]) == ["4"]


class TestCoerceNumbers:
    """Tests for coerce_numbers."""

    def test_parses_integers(self):
        assert coerce_numbers(["1", "-2", "+3"]) == [1, -2, 3]

    def test_drops_non_numeric(self):
        assert coerce_numbers(["1", "abc", "x2", "3"]) == [1, 3]

    def test_keeps_leading_integer(self):
        assert coerce_numbers(["2.5", "12abc", "-5abc"]) == [2, 12, -5]

    def test_digit_runs_beyond_conversion_limit(self):
        big = "9" * 5000
        assert coerce_numbers([big, "-" + big]) == [10**5000 - 1, -(10**5000 - 1)]

    def test_preserves_order(self):
        assert coerce_numbers(["9", "1", "5"]) == [9, 1, 5]


class TestSumWithinBound:
    """Tests for sum_within_bound."""

    def test_sums_values(self):
        assert sum_within_bound([1, 2, 3]) == 6

    def test_empty_is_zero(self):
        assert sum_within_bound([]) == 0

    def test_bound_is_inclusive(self):
        assert sum_within_bound([MAX_VALUE, MAX_VALUE + 1]) == MAX_VALUE

    def test_custom_bound(self):
        assert sum_within_bound([5, 10, 11], upper_bound=10) == 15
