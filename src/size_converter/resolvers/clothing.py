"""Clothing, dress and jacket size resolver."""

from __future__ import annotations

from size_converter.repository import ReferenceTable
from size_converter.resolvers.base import BaseResolver, Resolution
from size_converter.types import Gender, SizeSystem, SizeType

# US-scale reference value + offset = EU size.
EU_OFFSETS = {"men": 10, "women": 30}

COMMON_SIZES = {
    "men": ("S", "M", "L", "XL", "38", "40", "42"),
    "women": ("XS", "S", "M", "L", "4", "6", "8", "10"),
}


class ClothingResolver(BaseResolver):
    category = "clothing"
    size_type = SizeType.CLOTHING
    supported_systems = (
        SizeSystem.US,
        SizeSystem.UK,
        SizeSystem.EU,
        SizeSystem.FR,
        SizeSystem.IT,
        SizeSystem.AU,
    )
    requires_gender = True

    def variant_for(self, gender: Gender) -> str:
        return "women" if gender == Gender.WOMEN else "men"

    def fallback(
        self,
        table: ReferenceTable,
        reference: float,
        from_system: SizeSystem,
        to_system: SizeSystem,
        gender: Gender,
    ) -> Resolution | None:
        if to_system != SizeSystem.EU:
            return None
        offset = EU_OFFSETS[self.variant_for(gender)]
        return Resolution(
            str(int(reference) + offset),
            "formula",
            reference=reference,
            formula=f"standard US to EU sizing (+{offset})",
        )

    def get_suggestions(self, size: str, system: SizeSystem, gender: Gender = Gender.UNISEX) -> list[str]:
        return list(COMMON_SIZES[self.variant_for(gender)])
