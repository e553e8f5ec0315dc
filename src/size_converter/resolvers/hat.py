"""Hat size resolver."""

from __future__ import annotations

from size_converter.normalization import has_fraction, normalize_hat_fraction, normalize_size
from size_converter.resolvers.base import BaseResolver
from size_converter.types import Gender, SizeSystem, SizeType


class HatResolver(BaseResolver):
    """Fitted hat sizes; accepts eighths fractions such as "7 1/8"."""

    category = "hat"
    size_type = SizeType.HAT
    supported_systems = (SizeSystem.US, SizeSystem.UK, SizeSystem.EU, SizeSystem.CM, SizeSystem.IN)
    common_sizes = ("7", "7.125", "7.25", "7.5")

    def normalize(self, size: str) -> str:
        return normalize_hat_fraction(normalize_size(size))

    def get_suggestions(self, size: str, system: SizeSystem, gender: Gender = Gender.UNISEX) -> list[str]:
        if has_fraction(size):
            return [self.normalize(size)]
        return list(self.common_sizes)
