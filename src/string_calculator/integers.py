"""Integer conversion for digit strings of any length."""

# int() and str() refuse more than 4300 digits on recent interpreters
CHUNK_DIGITS = 4000


def parse_integer(literal: str) -> int:
    """
    Convert an optionally signed run of ASCII digits to an int.

    Digits are consumed in fixed-size chunks, so the interpreter's
    string-conversion limit never applies.

    Example:
        >>> parse_integer("-0042")
        -42
    """
    sign = literal[:1]
    digits = literal[1:] if sign in ("+", "-") else literal

    value = 0
    for start in range(0, len(digits), CHUNK_DIGITS):
        chunk = digits[start : start + CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)

    return -value if sign == "-" else value


def format_integer(value: int) -> str:
    """Decimal text of an int, however many digits it has."""
    base = 10**CHUNK_DIGITS
    magnitude = abs(value)
    if magnitude < base:
        return str(value)

    chunks = []
    while magnitude >= base:
        magnitude, rest = divmod(magnitude, base)
        chunks.append(f"{rest:0{CHUNK_DIGITS}d}")
    chunks.append(str(magnitude))

    return ("-" if value < 0 else "") + "".join(reversed(chunks))
