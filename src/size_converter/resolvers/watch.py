"""Watch case size resolver."""

from __future__ import annotations

from size_converter.normalization import normalize_size, strip_mm_suffix
from size_converter.patterns import NUMERIC_SIZE, WATCH_CM
from size_converter.resolvers.base import BaseResolver, Failure, Resolution
from size_converter.types import Gender, SizeSystem, SizeType


class WatchResolver(BaseResolver):
    """Case diameters in millimetres read the same in every system.

    A whole-number size is returned as is; centimetre sizes ("4.2") go
    through the table.
    """

    category = "watch"
    size_type = SizeType.WATCH
    supported_systems = (SizeSystem.US, SizeSystem.EU, SizeSystem.CM)
    common_sizes = ("38", "40", "42", "44")

    def normalize(self, size: str) -> str:
        return strip_mm_suffix(normalize_size(size))

    def is_valid(self, size: str, system: SizeSystem, gender: Gender = Gender.UNISEX) -> bool:
        token = self.normalize(size)
        if NUMERIC_SIZE.match(token):
            return True
        return WATCH_CM.match(token) is not None and self.tables.table().contains(system, token)

    def resolve(
        self,
        token: str,
        size: str,
        from_system: SizeSystem,
        to_system: SizeSystem,
        gender: Gender,
    ) -> Resolution | Failure:
        if NUMERIC_SIZE.match(token):
            return Resolution(token, "exact")
        return super().resolve(token, size, from_system, to_system, gender)
