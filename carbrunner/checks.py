"""Pass/fail heuristics over rendered calculator output.

All checks are substring tests on the page source. The calculator's result
markup is not versioned, so nothing here parses the page structurally.
"""

from __future__ import annotations

import re

# A token-bearing success output carries both terms (case-sensitive).
RESULT_TOKENS = ("gram", "carbohydrate")

# Any of these after typing a non-numeric age counts as inline validation.
VALIDATION_TOKENS = ("positive numbers only", "invalid", "number")

OUT_OF_RANGE_TOKENS = ("out of bounds", "invalid age")

# "250 grams", "250 - 406 grams", "1,234.5 grams/day"
_GRAMS_RE = re.compile(r"(\d[\d,]*(?:\.\d+)?(?:\s*-\s*\d[\d,]*(?:\.\d+)?)?)\s*grams", re.IGNORECASE)
_RESULT_ANCHOR = 'class="h2result"'


def has_result(source: str) -> bool:
    """True when the page carries a carbohydrate recommendation."""
    return all(token in source for token in RESULT_TOKENS)


def shows_validation(source: str) -> bool:
    """True when the page shows any input-validation wording."""
    lowered = source.lower()
    return any(token in lowered for token in VALIDATION_TOKENS)


def rejects_out_of_range(source: str) -> bool:
    """An out-of-range age was refused: error wording, or no result at all."""
    lowered = source.lower()
    return any(token in lowered for token in OUT_OF_RANGE_TOKENS) or "gram" not in lowered


def rejects_negative_weight(source: str) -> bool:
    """A negative weight was refused: no result, or a 'positive' hint."""
    lowered = source.lower()
    return "gram" not in lowered or "positive" in lowered


def outputs_differ(first: str, second: str) -> bool:
    """Two captured outputs are not identical.

    Any markup difference counts, including noise unrelated to the
    computed result; see carb_figures() for the numbers themselves.
    """
    return first != second


def carb_figures(source: str, limit: int = 3) -> list[str]:
    """Extract the first gram figures of the result, e.g. ['250 - 406'].

    Searches from the result heading when the page has one, otherwise the
    whole source. Returns an empty list when no figure is found.
    """
    start = source.find(_RESULT_ANCHOR)
    scope = source[start:] if start >= 0 else source
    return [m.group(1) for m in _GRAMS_RE.finditer(scope)][:limit]


def describe(label: str, source: str) -> str:
    """One detail line summarising a captured output."""
    status = "result" if has_result(source) else "no result"
    figures = carb_figures(source)
    if figures:
        return f"{label}: {status} ({', '.join(figures)} g)"
    return f"{label}: {status}"
