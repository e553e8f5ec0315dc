"""Sock size resolver."""

from __future__ import annotations

from size_converter.resolvers.base import DEFAULT_TOLERANCE, BaseResolver
from size_converter.resolvers.shoe import ShoeResolver
from size_converter.schema import ConversionError, ConversionResult
from size_converter.types import Gender, SizeSystem, SizeType


class SockResolver(BaseResolver):
    """Sock sizes follow shoe sizes in the systems socks are sold in."""

    category = "shoe"
    size_type = SizeType.SOCK
    supported_systems = (SizeSystem.US, SizeSystem.UK, SizeSystem.EU)
    requires_gender = True
    common_sizes = ("6", "7", "8", "9", "10", "11", "12")

    def __init__(self, shoe: ShoeResolver | None = None, *, tolerance: float = DEFAULT_TOLERANCE):
        self.shoe = shoe if shoe is not None else ShoeResolver(tolerance=tolerance)
        super().__init__(self.shoe.tables, tolerance=tolerance)

    def convert_with_details(
        self,
        size: str,
        from_system: SizeSystem,
        to_system: SizeSystem,
        gender: Gender = Gender.UNISEX,
        size_type: SizeType | None = None,
    ) -> ConversionResult:
        size_type = size_type or self.size_type
        for system in (from_system, to_system):
            if system not in self.supported_systems:
                return ConversionResult(
                    original_size=size,
                    from_system=from_system,
                    to_system=to_system,
                    size_type=size_type,
                    gender=gender,
                    error=ConversionError.unsupported_system(system, size_type),
                )
        return self.shoe.convert_with_details(size, from_system, to_system, gender, size_type)

    def is_valid(self, size: str, system: SizeSystem, gender: Gender = Gender.UNISEX) -> bool:
        return system in self.supported_systems and self.shoe.is_valid(size, system, gender)
