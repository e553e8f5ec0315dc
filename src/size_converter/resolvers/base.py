"""Base resolver interface and the shared table-lookup algorithm."""

from __future__ import annotations

import logging
from abc import ABC
from dataclasses import dataclass

from size_converter.confidence import ResolutionPath, build_notes, score
from size_converter.normalization import format_number, normalize_size
from size_converter.patterns import SHOE_SIZE, matches
from size_converter.repository import ReferenceTable, TableRepository, load_tables
from size_converter.schema import ConversionError, ConversionResult
from size_converter.types import Gender, SizeSystem, SizeType

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 0.01


@dataclass(frozen=True)
class Resolution:
    """A converted size and how it was produced."""

    token: str
    path: ResolutionPath
    reference: float | None = None
    reference_span: tuple[float, float] | None = None
    formula: str | None = None
    suggested_range: str | None = None
    notes: tuple[str, ...] = ()


@dataclass(frozen=True)
class Failure:
    error: ConversionError
    notes: str | None = None


class BaseResolver(ABC):
    """Converts sizes of one category between sizing systems.

    Subclasses declare their category and supported systems and override the
    hooks (``select_table``, ``reference_value``, ``fallback``) where the
    category deviates from a plain table lookup.
    """

    category: str = ""
    size_type: SizeType = SizeType.CLOTHING
    supported_systems: tuple[SizeSystem, ...] = ()
    requires_gender: bool = False
    # Tie-break between equivalent target tokens: numbers before letters.
    prefer_numeric: bool = True
    expected_format: str = ""
    common_sizes: tuple[str, ...] = ()

    def __init__(self, tables: TableRepository | None = None, *, tolerance: float = DEFAULT_TOLERANCE):
        self.tables = tables if tables is not None else load_tables(self.category)
        self.tolerance = tolerance

    def convert(
        self,
        size: str,
        from_system: SizeSystem,
        to_system: SizeSystem,
        gender: Gender = Gender.UNISEX,
    ) -> str | None:
        return self.convert_with_details(size, from_system, to_system, gender).converted_size

    def convert_with_details(
        self,
        size: str,
        from_system: SizeSystem,
        to_system: SizeSystem,
        gender: Gender = Gender.UNISEX,
        size_type: SizeType | None = None,
    ) -> ConversionResult:
        size_type = size_type or self.size_type
        gender = self.result_gender(gender)

        def fail(error: ConversionError, notes: str | None = None) -> ConversionResult:
            return ConversionResult(
                original_size=size,
                from_system=from_system,
                to_system=to_system,
                size_type=size_type,
                gender=gender,
                confidence=0.0,
                error=error,
                notes=notes,
            )

        for system in (from_system, to_system):
            if system not in self.supported_systems:
                return fail(ConversionError.unsupported_system(system, size_type))

        gender_error = self.check_gender(gender, size_type)
        if gender_error is not None:
            return fail(gender_error)

        token = self.normalize(size)
        if from_system == to_system:
            if self.is_valid(size, from_system, gender):
                outcome: Resolution | Failure = Resolution(token, "same_system")
            else:
                outcome = Failure(ConversionError.invalid_size(size))
        else:
            outcome = self.resolve(token, size, from_system, to_system, gender)

        if isinstance(outcome, Failure):
            logger.debug("%s %s->%s failed for %r: %s", size_type.value, from_system.value,
                         to_system.value, size, outcome.error.kind)
            return fail(outcome.error, outcome.notes)

        return ConversionResult(
            original_size=size,
            converted_size=outcome.token,
            from_system=from_system,
            to_system=to_system,
            size_type=size_type,
            gender=gender,
            confidence=score(
                outcome.path,
                size_type,
                from_system,
                to_system,
                gender,
                reference=outcome.reference,
                reference_span=outcome.reference_span,
            ),
            notes=build_notes(
                outcome.path,
                size_type,
                from_system,
                to_system,
                gender,
                formula=outcome.formula,
                extra=outcome.notes,
            ),
            suggested_range=outcome.suggested_range,
        )

    def is_valid(self, size: str, system: SizeSystem, gender: Gender = Gender.UNISEX) -> bool:
        token = self.normalize(size)
        if not matches(token, self.size_type):
            return False
        table = self.select_table(token, gender)
        return table is not None and table.contains(system, token)

    def get_suggestions(self, size: str, system: SizeSystem, gender: Gender = Gender.UNISEX) -> list[str]:
        return list(self.common_sizes)

    # Hooks

    def normalize(self, size: str) -> str:
        return normalize_size(size)

    def result_gender(self, gender: Gender) -> Gender:
        return gender

    def check_gender(self, gender: Gender, size_type: SizeType) -> ConversionError | None:
        return None

    def variant_for(self, gender: Gender) -> str:
        return "default"

    def select_table(self, token: str, gender: Gender) -> ReferenceTable | None:
        return self.tables.table(self.variant_for(gender))

    def reference_value(self, table: ReferenceTable, system: SizeSystem, token: str) -> float | None:
        return table.lookup(system, token)

    def fallback(
        self,
        table: ReferenceTable,
        reference: float,
        from_system: SizeSystem,
        to_system: SizeSystem,
        gender: Gender,
    ) -> Resolution | None:
        return None

    # Shared algorithm

    def resolve(
        self,
        token: str,
        size: str,
        from_system: SizeSystem,
        to_system: SizeSystem,
        gender: Gender,
    ) -> Resolution | Failure:
        table = self.select_table(token, gender)
        if table is None:
            return Failure(ConversionError.invalid_format(size, self.expected_format))

        reference = self.reference_value(table, from_system, token)
        if reference is None:
            return Failure(
                ConversionError.invalid_size(size),
                notes=f"Size not found in {from_system.full_name} table",
            )

        target = self.find_token(table, to_system, reference)
        if target is not None:
            return Resolution(target, "exact", reference=reference, reference_span=table.reference_span())

        fallback = self.fallback(table, reference, from_system, to_system, gender)
        if fallback is not None:
            logger.debug("%s %r resolved by %s", self.category, size, fallback.path)
            return fallback

        return Failure(ConversionError.size_out_of_range(size, self.valid_range(table, from_system)))

    def find_token(self, table: ReferenceTable, system: SizeSystem, reference: float) -> str | None:
        """Target token whose reference value lies within tolerance.

        Ties are broken deterministically: numeric tokens by value first
        (letters first when ``prefer_numeric`` is off), then lexical order.
        """
        candidates = [
            token for token, value in table.entries(system).items() if abs(value - reference) < self.tolerance
        ]
        if not candidates:
            return None
        return min(candidates, key=self._tie_break_key)

    def _tie_break_key(self, token: str) -> tuple[bool, float, str]:
        value = as_number(token)
        is_numeric = value is not None
        return (is_numeric != self.prefer_numeric, value if is_numeric else 0.0, token)

    def valid_range(self, table: ReferenceTable, system: SizeSystem) -> str:
        entries = table.entries(system)
        numbers = sorted(value for value in (as_number(token) for token in entries) if value is not None)
        if numbers:
            return f"{format_number(numbers[0])} - {format_number(numbers[-1])}"
        if entries:
            ordered = sorted(entries, key=lambda token: (entries[token], token))
            return f"{ordered[0]} - {ordered[-1]}"
        return "Unknown"


def as_number(token: str) -> float | None:
    """Numeric value of a purely numeric token, otherwise None."""
    if SHOE_SIZE.match(token):
        return float(token)
    return None
