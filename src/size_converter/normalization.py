"""Size token normalization."""

from __future__ import annotations

import re

# Applied in order.
_FRACTIONS: tuple[tuple[str, str], ...] = (
    (" 1/2", ".5"),
    ("-1/2", ".5"),
    (" 3/4", ".75"),
    (" 1/4", ".25"),
)

# Full-string synonyms, first match wins in insertion order.
SIZE_SYNONYMS: dict[str, str] = {
    "EXTRA SMALL": "XS",
    "EXTRA-SMALL": "XS",
    "XSMALL": "XS",
    "SMALL": "S",
    "MEDIUM": "M",
    "LARGE": "L",
    "EXTRA LARGE": "XL",
    "EXTRA-LARGE": "XL",
    "XLARGE": "XL",
    "EXTRA EXTRA LARGE": "XXL",
    "2XL": "XXL",
    "XXLARGE": "XXL",
    "3XL": "XXXL",
    "XXXLARGE": "XXXL",
}

_HAT_EIGHTHS: tuple[tuple[str, str], ...] = (
    (" 1/8", ".125"),
    (" 1/4", ".25"),
    (" 3/8", ".375"),
    (" 5/8", ".625"),
    (" 3/4", ".75"),
    (" 7/8", ".875"),
)


def normalize_size(raw: str) -> str:
    """Return the canonical token for a raw size string.

    Trims, upper-cases, rewrites common fractions to decimals
    ("9 1/2" -> "9.5") and collapses long size names ("EXTRA LARGE" -> "XL").
    """
    token = (raw or "").strip().upper()
    for fraction, decimal in _FRACTIONS:
        token = token.replace(fraction, decimal)

    for long_name, short_name in SIZE_SYNONYMS.items():
        if token == long_name:
            return short_name
    return token


def normalize_sizes(sizes: list[str]) -> list[str]:
    return [normalize_size(size) for size in sizes]


def numeric_value(token: str) -> float | None:
    """Extract the numeric part of a size ("42MM" -> 42.0)."""
    cleaned = re.sub(r"[^0-9.]", "", token)
    try:
        return float(cleaned)
    except ValueError:
        return None


def has_fraction(raw: str) -> bool:
    return "/" in raw


def normalize_hat_fraction(token: str) -> str:
    """Rewrite an eighths fraction ("7 1/8" -> "7.125")."""
    for fraction, decimal in _HAT_EIGHTHS:
        if fraction.strip() in token:
            return token.replace(fraction, decimal)
    return token


def strip_mm_suffix(token: str) -> str:
    return re.sub(r"mm$", "", token.strip(), flags=re.IGNORECASE)


def format_number(value: float) -> str:
    """Render a table number without a trailing '.0' ("4.0" -> "4")."""
    return f"{value:g}"
