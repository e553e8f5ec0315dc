"""Swimwear size resolver."""

from __future__ import annotations

from size_converter.resolvers.base import BaseResolver
from size_converter.schema import ConversionError
from size_converter.types import Gender, SizeSystem, SizeType

COMMON_SIZES = {
    Gender.MEN: ("S", "M", "L", "XL", "32", "34"),
    Gender.WOMEN: ("XS", "S", "M", "L", "34B", "36C"),
}


class SwimwearResolver(BaseResolver):
    """Separate men's and women's tables; other audiences are rejected."""

    category = "swimwear"
    size_type = SizeType.SWIMWEAR
    supported_systems = (SizeSystem.US, SizeSystem.UK, SizeSystem.EU, SizeSystem.AU)
    requires_gender = True

    def check_gender(self, gender: Gender, size_type: SizeType) -> ConversionError | None:
        if gender not in COMMON_SIZES:
            return ConversionError.gender_required(size_type)
        return None

    def variant_for(self, gender: Gender) -> str:
        return gender.value

    def is_valid(self, size: str, system: SizeSystem, gender: Gender = Gender.UNISEX) -> bool:
        return gender in COMMON_SIZES and super().is_valid(size, system, gender)

    def get_suggestions(self, size: str, system: SizeSystem, gender: Gender = Gender.UNISEX) -> list[str]:
        return list(COMMON_SIZES.get(gender, COMMON_SIZES[Gender.WOMEN]))
