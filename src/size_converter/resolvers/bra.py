"""Bra size resolver."""

from __future__ import annotations

from size_converter.patterns import parse_bra_size
from size_converter.repository import ReferenceTable
from size_converter.resolvers.base import BaseResolver, Failure, Resolution
from size_converter.schema import ConversionError
from size_converter.types import Gender, SizeSystem, SizeType


class BraResolver(BaseResolver):
    """Converts band and cup independently; both must resolve."""

    category = "bra"
    size_type = SizeType.BRA
    supported_systems = (SizeSystem.US, SizeSystem.UK, SizeSystem.EU, SizeSystem.FR, SizeSystem.AU)
    expected_format = "34B"
    common_sizes = ("32B", "34B", "34C", "36C", "36D")

    def result_gender(self, gender: Gender) -> Gender:
        return Gender.WOMEN

    @property
    def bands(self) -> ReferenceTable:
        return self.tables.table("band")

    @property
    def cups(self) -> ReferenceTable:
        return self.tables.table("cup")

    def is_valid(self, size: str, system: SizeSystem, gender: Gender = Gender.UNISEX) -> bool:
        parsed = parse_bra_size(self.normalize(size))
        if parsed is None:
            return False
        band, cup = parsed
        return self.bands.contains(system, band) and self.cups.contains(system, cup)

    def resolve(
        self,
        token: str,
        size: str,
        from_system: SizeSystem,
        to_system: SizeSystem,
        gender: Gender,
    ) -> Resolution | Failure:
        parsed = parse_bra_size(token)
        if parsed is None:
            return Failure(ConversionError.invalid_format(size, self.expected_format))
        band, cup = parsed

        band_reference = self.bands.lookup(from_system, band)
        cup_reference = self.cups.lookup(from_system, cup)
        if band_reference is None or cup_reference is None:
            return Failure(ConversionError.invalid_size(size))

        target_band = self.find_token(self.bands, to_system, band_reference)
        target_cup = self.find_token(self.cups, to_system, cup_reference)
        if target_band is None or target_cup is None:
            return Failure(ConversionError.size_out_of_range(size, self.valid_range(self.bands, from_system)))

        return Resolution(
            f"{target_band}{target_cup}",
            "exact",
            reference=band_reference,
            notes=tuple(cup_notes(cup, target_cup, to_system)),
        )

    def valid_range(self, table: ReferenceTable, system: SizeSystem) -> str:
        bands = sorted(self.bands.entries(system), key=lambda token: self.bands.entries(system)[token])
        cups = sorted(self.cups.entries(system), key=lambda token: self.cups.entries(system)[token])
        if not bands or not cups:
            return "Unknown"
        return f"{bands[0]}{cups[0]}-{bands[-1]}{cups[-1]}"


def cup_notes(cup: str, target_cup: str, to_system: SizeSystem) -> list[str]:
    if cup == target_cup:
        return []
    if cup == "DDD" and target_cup == "E":
        return [f"{to_system.value} uses 'E' instead of 'DDD'"]
    if cup == "DD" and target_cup == "E":
        return [f"{to_system.value} uses 'E' for DD cup sizes"]
    return [f"Cup designation changed from '{cup}' to '{target_cup}'"]
