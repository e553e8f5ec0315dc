"""Children's size resolver.

The sub-table is picked from the shape of the size: "6M" is infant, "3T" is
toddler, letters are youth and plain numbers are children's sizes. Sizes
written in EU or FR form therefore only resolve when they match one of those
shapes.
"""

from __future__ import annotations

from size_converter.patterns import children_group
from size_converter.repository import ReferenceTable
from size_converter.resolvers.base import BaseResolver
from size_converter.types import Gender, SizeSystem, SizeType

COMMON_SIZES = {
    "infant": ("0M", "3M", "6M", "12M", "18M"),
    "toddler": ("2T", "3T", "4T", "5T"),
    "children": ("4", "6", "8", "10", "12"),
    "youth": ("XS", "S", "M", "L", "XL"),
}


class ChildrenResolver(BaseResolver):
    category = "children"
    size_type = SizeType.CLOTHING
    supported_systems = (SizeSystem.US, SizeSystem.UK, SizeSystem.EU, SizeSystem.FR)
    requires_gender = True
    expected_format = "3M, 2T, 4, XS"

    def select_table(self, token: str, gender: Gender) -> ReferenceTable | None:
        group = children_group(token)
        if group is None:
            return None
        return self.tables.table(group)

    def is_valid(self, size: str, system: SizeSystem, gender: Gender = Gender.CHILDREN) -> bool:
        token = self.normalize(size)
        return any(table.contains(system, token) for table in self.tables.tables.values())

    def get_suggestions(self, size: str, system: SizeSystem, gender: Gender = Gender.CHILDREN) -> list[str]:
        token = self.normalize(size)
        group = children_group(token)
        if group is None:
            group = "infant" if "M" in token else "toddler" if "T" in token else "children"
        return list(COMMON_SIZES[group])
