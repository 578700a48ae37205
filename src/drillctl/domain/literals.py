"""Numeric literal matching.

Grammar, matched against the whole string (ASCII digits only)::

    literal  := sign? mantissa exponent?
    sign     := "+" | "-"
    mantissa := digits | digits "." digits* | "." digits+ | "."?
    exponent := ("e" | "E") sign? digits*

The grammar is deliberately loose: an empty mantissa, a bare ``"."``,
and an exponent marker with no digits (``"-70e"``) all match.
"""

from __future__ import annotations

import re

NUMERIC_LITERAL: re.Pattern[str] = re.compile(
    r"[+-]?(\d+|\d+\.\d*|\.\d+|\.?)([eE][+-]?\d*)?",
    re.ASCII,
)

REFERENCE_SAMPLES: tuple[str, ...] = (
    "1E10",
    "5e-10",
    "5.5",
    ".3",
    "-5e-4",
    "-70e",
    ".",
)


def is_valid_numeric_literal(text: str) -> bool:
    """Return True if *text* is a numeric literal under the loose grammar."""
    return NUMERIC_LITERAL.fullmatch(text) is not None
