"""Shoe size resolver."""

from __future__ import annotations

import logging

from size_converter.normalization import has_fraction, normalize_size, numeric_value
from size_converter.repository import ReferenceTable
from size_converter.resolvers.base import BaseResolver, Resolution, as_number
from size_converter.types import Gender, SizeSystem, SizeType

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 5


class ShoeResolver(BaseResolver):
    """Men's and women's shoe sizes; any other audience uses the men's table.

    Sizes above the end of a target table are extrapolated from the two
    largest entries of that table.
    """

    category = "shoe"
    size_type = SizeType.SHOE
    supported_systems = (
        SizeSystem.US,
        SizeSystem.UK,
        SizeSystem.EU,
        SizeSystem.AU,
        SizeSystem.JP,
        SizeSystem.CM,
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
        entries = sorted(table.entries(to_system).items(), key=lambda item: (item[1], item[0]))
        if len(entries) < 2:
            return None

        (second_token, second_reference), (largest_token, largest_reference) = entries[-2:]
        if reference <= largest_reference:
            return None

        largest, second = as_number(largest_token), as_number(second_token)
        reference_increment = largest_reference - second_reference
        if largest is None or second is None or reference_increment <= 0:
            return None

        token_increment = largest - second
        steps = int((reference - largest_reference) / reference_increment)
        value = largest + steps * token_increment
        half = token_increment / 2
        logger.debug(
            "Extrapolated %s shoe reference %s to %s %.1f", from_system.value, reference, to_system.value, value
        )
        return Resolution(
            f"{value:.1f}",
            "extrapolated",
            reference=reference,
            suggested_range=f"{value - half:.1f} - {value + half:.1f}",
        )

    def get_suggestions(self, size: str, system: SizeSystem, gender: Gender = Gender.UNISEX) -> list[str]:
        token = normalize_size(size)
        suggestions: list[str] = []
        if has_fraction(size):
            suggestions.append(token)

        value = numeric_value(token)
        if value is not None:
            entries = self.tables.table(self.variant_for(gender)).entries(system)
            nearby = [
                candidate
                for candidate in entries
                if as_number(candidate) is not None and abs(as_number(candidate) - value) <= 1.0
            ]
            suggestions.extend(sorted(nearby, key=as_number))

        return list(dict.fromkeys(suggestions))[:MAX_SUGGESTIONS]
