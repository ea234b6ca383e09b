"""Command line entry point: sum a delimited string."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from string_calculator.core import evaluate
from string_calculator.log import setup_logging
from string_calculator.samples import SAMPLE_INPUTS
from string_calculator.settings import LOG_LEVELS, get_settings

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="string-calculator",
        description="Sum the numbers in a delimited string.",
    )
    p.add_argument("text", nargs="?", help="input text; read from stdin when omitted")
    p.add_argument(
        "-e",
        "--unescape",
        action="store_true",
        help="treat the two characters \\n in TEXT as a newline",
    )
    p.add_argument("--upper-bound", type=_non_negative_int, default=None, help="largest value that is summed")
    p.add_argument("--samples", action="store_true", help="evaluate the built-in sample inputs")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None, help="logging level")
    return p


def _read_input(args: argparse.Namespace) -> str:
    if args.text is not None:
        text = args.text
    else:
        text = sys.stdin.read()
        if text.endswith("\n"):
            text = text[:-1]
    if args.unescape:
        text = text.replace("\\n", "\n")
    return text


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid settings\n{e}", file=sys.stderr)
        return 2

    setup_logging(args.log_level or settings.log_level)
    upper_bound = settings.upper_bound if args.upper_bound is None else args.upper_bound

    if args.samples:
        for label, text in SAMPLE_INPUTS:
            print(f"{label}: {evaluate(text, upper_bound)}")
        return 0

    text = _read_input(args)
    logger.debug("Evaluating %r", text)
    outcome = evaluate(text, upper_bound)

    if not outcome.ok:
        print(f"Error: {outcome.error}", file=sys.stderr)
        return 1

    print(outcome.value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
