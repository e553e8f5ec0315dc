"""Reference table repository."""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from importlib import import_module
from importlib.resources import files
from types import MappingProxyType
from typing import Mapping

from size_converter.exceptions import TableNotFoundError
from size_converter.types import SizeSystem

_EMPTY: Mapping[str, float] = MappingProxyType({})


@dataclass(frozen=True)
class ReferenceTable:
    """Token -> reference value mappings for every system of one table variant."""

    category: str
    variant: str
    systems: Mapping[SizeSystem, Mapping[str, float]]

    def entries(self, system: SizeSystem) -> Mapping[str, float]:
        return self.systems.get(system, _EMPTY)

    def lookup(self, system: SizeSystem, token: str) -> float | None:
        return self.entries(system).get(token)

    def contains(self, system: SizeSystem, token: str) -> bool:
        return token in self.entries(system)

    def reference_span(self) -> tuple[float, float] | None:
        values = [value for entries in self.systems.values() for value in entries.values()]
        if not values:
            return None
        return min(values), max(values)


class TableRepository:
    """Loads the reference tables of one size category."""

    def __init__(self, category: str, data: Mapping[str, Mapping[str, Mapping[str, float]]] | None = None):
        self.category = category
        raw = data if data is not None else self._load_raw()
        self.tables: dict[str, ReferenceTable] = {
            variant: _build_table(category, variant, systems) for variant, systems in raw.items()
        }

    def table(self, variant: str = "default") -> ReferenceTable:
        try:
            return self.tables[variant]
        except KeyError:
            raise TableNotFoundError(f"No '{variant}' table for {self.category}") from None

    def variants(self) -> list[str]:
        return list(self.tables)

    def _load_raw(self) -> Mapping[str, Mapping[str, Mapping[str, float]]]:
        try:
            module = import_module(f"size_converter.data.{self.category}")
            return module.TABLES
        except ModuleNotFoundError:
            path = files("size_converter.data").joinpath(f"{self.category}.json")
            if not path.is_file():
                raise TableNotFoundError(f"No reference tables for {self.category}") from None
            return json.loads(path.read_text(encoding="utf-8"))


@lru_cache(maxsize=None)
def load_tables(category: str) -> TableRepository:
    """Cached repository for a packaged category."""
    return TableRepository(category)


def _build_table(category: str, variant: str, systems: Mapping[str, Mapping[str, float]]) -> ReferenceTable:
    frozen = {
        SizeSystem(code): MappingProxyType({token: float(value) for token, value in entries.items()})
        for code, entries in systems.items()
    }
    return ReferenceTable(category=category, variant=variant, systems=MappingProxyType(frozen))
