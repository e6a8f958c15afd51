"""Display helpers for horizons and masked currency input."""

from __future__ import annotations

import math
import re

NEVER_LABEL = "nunca"
UNKNOWN_HORIZON_PHRASE = "tempo indeterminado"

_NON_DIGITS = re.compile(r"\D")
_THOUSANDS = re.compile(r"\B(?=(\d{3})+(?!\d))")


def format_years(years: float) -> str:
    """One decimal place with a decimal comma, e.g. 8.333 -> "8,3"."""
    if math.isinf(years):
        return NEVER_LABEL
    return f"{years:.1f}".replace(".", ",")


def horizon_phrase(years: float) -> str:
    if math.isinf(years):
        return UNKNOWN_HORIZON_PHRASE
    return f"{format_years(years)} anos"


def format_currency_input(raw: str) -> str:
    """Mask typed input as digits with dot thousands separators."""
    if not raw:
        return ""
    digits = _NON_DIGITS.sub("", raw)
    return _THOUSANDS.sub(".", digits)


def format_amount(amount: float) -> str:
    """Whole currency units in the same mask the form uses, e.g. "10.000"."""
    return format_currency_input(str(int(amount)))


def parse_currency(raw: str) -> int:
    digits = _NON_DIGITS.sub("", raw or "")
    return int(digits) if digits else 0


def json_years(years: float) -> float | None:
    # JSON has no infinity
    return None if math.isinf(years) else years
