"""Size grammars per size type."""

from __future__ import annotations

import re

from size_converter.types import SizeType

SHOE_SIZE = re.compile(r"^\d+(\.\d+)?$")

LETTER_SIZE = re.compile(r"^(XXS|XS|S|M|L|XL|XXL|XXXL)$")
NUMERIC_SIZE = re.compile(r"^\d+$")
PLUS_SIZE = re.compile(r"^\d*X{1,3}$")

BRA_SIZE = re.compile(r"^(\d{2,3})([A-K]+)$")

RING_NUMERIC = re.compile(r"^\d+(\.\d+)?$")
RING_LETTER = re.compile(r"^[A-Z]$")

HAT_FRACTION = re.compile(r"^\d+(\s*\d+/\d+)?$")
HAT_NUMERIC = re.compile(r"^\d+(\.\d+)?$")

WAIST_SIZE = re.compile(r"^\d{2,3}$")

WATCH_SIZE = re.compile(r"^\d{2,3}(MM)?$", re.IGNORECASE)
WATCH_CM = re.compile(r"^\d(\.\d+)?$")

INFANT_SIZE = re.compile(r"^\d{1,2}M$")
TODDLER_SIZE = re.compile(r"^\dT$")
CHILDREN_SIZE = re.compile(r"^\d{1,2}$")
YOUTH_SIZE = re.compile(r"^(XS|S|M|L|XL)$")

SWIMWEAR_SIZE = re.compile(r"^(\d{2,3}[A-K]+|XXS|XS|S|M|L|XL|XXL|\d+)$")

_QUICK_CLOTHING_SIZE = (
    re.compile(r"^\d+\.?5?$"),
    re.compile(r"^(XXS|XS|S|M|L|XL|XXL|XXXL)$"),
    re.compile(r"^\d+[A-Z]+$"),
)

GRAMMARS: dict[SizeType, tuple[re.Pattern[str], ...]] = {
    SizeType.SHOE: (SHOE_SIZE,),
    SizeType.SOCK: (SHOE_SIZE,),
    SizeType.CLOTHING: (LETTER_SIZE, NUMERIC_SIZE, PLUS_SIZE),
    SizeType.DRESS: (LETTER_SIZE, NUMERIC_SIZE, PLUS_SIZE),
    SizeType.JACKET: (LETTER_SIZE, NUMERIC_SIZE, PLUS_SIZE),
    SizeType.BRA: (BRA_SIZE,),
    SizeType.RING: (RING_NUMERIC, RING_LETTER),
    SizeType.HAT: (HAT_FRACTION, HAT_NUMERIC),
    SizeType.GLOVE: (LETTER_SIZE, NUMERIC_SIZE),
    SizeType.BELT: (WAIST_SIZE,),
    SizeType.PANTS: (WAIST_SIZE,),
    SizeType.WATCH: (WATCH_SIZE, WATCH_CM),
    SizeType.SWIMWEAR: (SWIMWEAR_SIZE,),
}

# Checked in this order; the first grammar that matches selects the sub-table.
CHILDREN_GRAMMARS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("infant", INFANT_SIZE),
    ("toddler", TODDLER_SIZE),
    ("youth", YOUTH_SIZE),
    ("children", CHILDREN_SIZE),
)


def matches_pattern(token: str, pattern: re.Pattern[str]) -> bool:
    return pattern.match(token) is not None


def matches(token: str, size_type: SizeType) -> bool:
    """Whether a normalized token fits the size grammar of a size type."""
    return any(pattern.match(token) for pattern in GRAMMARS.get(size_type, ()))


def children_group(token: str) -> str | None:
    """Name of the children's sub-table a token belongs to, if any."""
    for group, pattern in CHILDREN_GRAMMARS:
        if pattern.match(token):
            return group
    return None


def parse_bra_size(token: str) -> tuple[str, str] | None:
    """Split "34DD" into ("34", "DD")."""
    match = BRA_SIZE.match(token)
    if not match:
        return None
    return match.group(1), match.group(2)


def is_clothing_size(token: str) -> bool:
    """Quick check whether a string looks like any size at all."""
    return any(pattern.match(token) for pattern in _QUICK_CLOTHING_SIZE)
