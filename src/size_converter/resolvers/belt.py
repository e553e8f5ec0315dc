"""Belt and pants waist size resolver.

Only even waist sizes are tabulated. Any whole size inside a system's range
is accepted and converted through the system's linear relation to waist
inches: EU is inches + 16, CM is inches x 2.54 (truncated), US, UK and IN are
inches.
"""

from __future__ import annotations

import logging

from size_converter.patterns import WAIST_SIZE
from size_converter.repository import ReferenceTable
from size_converter.resolvers.base import BaseResolver, Resolution
from size_converter.types import Gender, SizeSystem, SizeType

logger = logging.getLogger(__name__)

WAIST_RANGES: dict[SizeSystem, tuple[int, int]] = {
    SizeSystem.US: (28, 50),
    SizeSystem.UK: (28, 50),
    SizeSystem.IN: (28, 50),
    SizeSystem.EU: (44, 66),
    SizeSystem.CM: (71, 127),
}

EU_OFFSET = 16
CM_PER_INCH = 2.54


def to_inches(system: SizeSystem, value: int) -> float:
    if system == SizeSystem.EU:
        return float(value - EU_OFFSET)
    if system == SizeSystem.CM:
        return value / CM_PER_INCH
    return float(value)


def from_inches(system: SizeSystem, inches: float) -> int:
    if system == SizeSystem.EU:
        return int(inches) + EU_OFFSET
    if system == SizeSystem.CM:
        return int(inches * CM_PER_INCH)
    return int(inches)


def describe_formula(from_system: SizeSystem, to_system: SizeSystem) -> str:
    steps = []
    if from_system == SizeSystem.EU:
        steps.append(f"-{EU_OFFSET}")
    elif from_system == SizeSystem.CM:
        steps.append(f"/{CM_PER_INCH}")
    if to_system == SizeSystem.EU:
        steps.append(f"+{EU_OFFSET}")
    elif to_system == SizeSystem.CM:
        steps.append(f"x{CM_PER_INCH}")
    return f"standard {from_system.value} to {to_system.value} waist sizing ({', '.join(steps) or '1:1'})"


class BeltResolver(BaseResolver):
    category = "belt"
    size_type = SizeType.BELT
    supported_systems = (SizeSystem.US, SizeSystem.UK, SizeSystem.EU, SizeSystem.CM, SizeSystem.IN)
    common_sizes = ("30", "32", "34", "36", "38", "40")

    def in_range(self, token: str, system: SizeSystem) -> bool:
        if not WAIST_SIZE.match(token) or system not in WAIST_RANGES:
            return False
        low, high = WAIST_RANGES[system]
        return low <= int(token) <= high

    def is_valid(self, size: str, system: SizeSystem, gender: Gender = Gender.UNISEX) -> bool:
        token = self.normalize(size)
        return self.in_range(token, system) or self.tables.table().contains(system, token)

    def reference_value(self, table: ReferenceTable, system: SizeSystem, token: str) -> float | None:
        reference = table.lookup(system, token)
        if reference is not None:
            return reference
        if self.in_range(token, system):
            return to_inches(system, int(token))
        return None

    def fallback(
        self,
        table: ReferenceTable,
        reference: float,
        from_system: SizeSystem,
        to_system: SizeSystem,
        gender: Gender,
    ) -> Resolution | None:
        value = from_inches(to_system, reference)
        low, high = WAIST_RANGES[to_system]
        if not low <= value <= high:
            return None
        formula = describe_formula(from_system, to_system)
        logger.debug("Waist %s inches converted to %s %s using %s", reference, to_system.value, value, formula)
        return Resolution(str(value), "formula", reference=reference, formula=formula)
