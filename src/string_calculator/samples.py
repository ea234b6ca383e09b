"""Labelled sample inputs covering each calculator rule."""

SAMPLE_INPUTS: tuple[tuple[str, str], ...] = (
    ("Empty string", ""),
    ("Single number", "5"),
    ("Two numbers", "1,2"),
    ("Multiple numbers", "1,2,3,4,5"),
    ("With newlines", "1\n2,3"),
    ("Custom delimiter", "//;\n1;2;3"),
    ("Multiple delimiters", "//[*][%]\n1*2%3"),
    ("Long delimiters", "//[***]\n1***2***3"),
    ("Numbers > 1000", "2,1001,3"),
    ("Negative numbers", "1,-2,3"),
    ("Multiple negatives", "1,-2,-3,4"),
)


def get_sample(label: str) -> str:
    """Return the sample text for a label, raising KeyError if unknown."""
    for sample_label, text in SAMPLE_INPUTS:
        if sample_label == label:
            return text
    raise KeyError(label)
