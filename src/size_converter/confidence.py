"""Confidence scores and advisory notes for conversion results.

Both are pure functions of the size type, the systems involved, the audience
and the resolution path that produced the size:

- ``same_system``: source and target system are identical.
- ``exact``: the target table holds the reference value.
- ``formula``: a linear formula produced the size.
- ``extrapolated``: the size lies beyond the target table (footwear only).

Notes are advisory; callers must use ``ConversionResult.error`` to decide
whether a conversion succeeded.
"""

from __future__ import annotations

from typing import Iterable, Literal

from size_converter.types import Gender, SizeSystem, SizeType

ResolutionPath = Literal["same_system", "exact", "formula", "extrapolated"]

SAME_SYSTEM_CONFIDENCE = 1.0
FORMULA_CONFIDENCE = 0.85
EXTRAPOLATED_CONFIDENCE = 0.7
CHILDREN_CONFIDENCE = 0.9
MIN_CONFIDENCE = 0.5

EXACT_BASELINES: dict[SizeType, float] = {
    SizeType.SHOE: 0.95,
    SizeType.SOCK: 0.95,
    SizeType.CLOTHING: 0.9,
    SizeType.DRESS: 0.9,
    SizeType.JACKET: 0.9,
    SizeType.BRA: 0.95,
    SizeType.RING: 0.98,
    SizeType.HAT: 0.95,
    SizeType.GLOVE: 0.9,
    SizeType.BELT: 0.9,
    SizeType.PANTS: 0.9,
    SizeType.WATCH: 1.0,
    SizeType.SWIMWEAR: 0.85,
}

FOOTWEAR = frozenset({SizeType.SHOE, SizeType.SOCK})
LESS_COMMON_SYSTEMS = frozenset({SizeSystem.JP, SizeSystem.CN, SizeSystem.KR})

# Share of the reference span at either end treated as an extreme size.
EXTREME_FRACTION = 0.1


def score(
    path: ResolutionPath,
    size_type: SizeType,
    from_system: SizeSystem,
    to_system: SizeSystem,
    gender: Gender,
    *,
    reference: float | None = None,
    reference_span: tuple[float, float] | None = None,
) -> float:
    if path == "same_system":
        return SAME_SYSTEM_CONFIDENCE
    if path == "formula":
        return FORMULA_CONFIDENCE
    if path == "extrapolated":
        return EXTRAPOLATED_CONFIDENCE
    if gender.is_childrens:
        return CHILDREN_CONFIDENCE

    confidence = EXACT_BASELINES.get(size_type, 0.9)
    if size_type in FOOTWEAR:
        confidence = _footwear_confidence(confidence, from_system, to_system, reference, reference_span)
    return round(confidence, 2)


def _footwear_confidence(
    confidence: float,
    from_system: SizeSystem,
    to_system: SizeSystem,
    reference: float | None,
    reference_span: tuple[float, float] | None,
) -> float:
    if from_system in LESS_COMMON_SYSTEMS or to_system in LESS_COMMON_SYSTEMS:
        confidence -= 0.1
    if from_system.is_measurement or to_system.is_measurement:
        confidence -= 0.05
    if reference is not None and reference_span is not None and _is_extreme(reference, reference_span):
        confidence -= 0.1
    return max(MIN_CONFIDENCE, confidence)


def _is_extreme(reference: float, span: tuple[float, float]) -> bool:
    low, high = span
    margin = (high - low) * EXTREME_FRACTION
    return reference <= low + margin or reference >= high - margin


def build_notes(
    path: ResolutionPath,
    size_type: SizeType,
    from_system: SizeSystem,
    to_system: SizeSystem,
    gender: Gender,
    *,
    formula: str | None = None,
    extra: Iterable[str] = (),
) -> str | None:
    notes = list(extra)
    if path == "same_system":
        notes.append("Same sizing system")
    elif path == "formula":
        notes.append(f"Converted using {formula}" if formula else "Converted using a sizing formula")
    elif path == "extrapolated":
        notes.append("Extended size - extrapolated conversion")
    else:
        notes.extend(_category_notes(size_type, from_system, to_system, gender))
    return ". ".join(notes) if notes else None


def _category_notes(
    size_type: SizeType, from_system: SizeSystem, to_system: SizeSystem, gender: Gender
) -> list[str]:
    if gender.is_childrens:
        return ["Children's sizing based on age/height"]
    if size_type in FOOTWEAR:
        return _footwear_notes(from_system, to_system, gender)
    if size_type == SizeType.BRA:
        return _bra_notes(from_system, to_system)
    if size_type == SizeType.RING:
        return ["Ring sizing is based on internal circumference"]
    if size_type == SizeType.HAT:
        return ["Hat sizing based on head circumference"]
    if size_type == SizeType.SWIMWEAR:
        return ["Swimwear sizing varies by brand and style"]
    return []


def _footwear_notes(from_system: SizeSystem, to_system: SizeSystem, gender: Gender) -> list[str]:
    notes: list[str] = []
    if from_system == SizeSystem.US and to_system == SizeSystem.UK:
        notes.append("UK sizes typically run 0.5 smaller than US")
    elif from_system == SizeSystem.UK and to_system == SizeSystem.US:
        notes.append("US sizes typically run 0.5 larger than UK")

    if to_system == SizeSystem.EU:
        notes.append("European sizes are consistent across most brands")
    if to_system in (SizeSystem.JP, SizeSystem.CM):
        notes.append("Japanese/CM sizes based on foot length measurement")
    if gender == Gender.WOMEN:
        notes.append("Women's shoe sizing can vary significantly between brands")
    return notes


def _bra_notes(from_system: SizeSystem, to_system: SizeSystem) -> list[str]:
    notes: list[str] = []
    if from_system == SizeSystem.US and to_system == SizeSystem.EU:
        notes.append("EU uses centimeter measurements for band sizes")
    elif from_system == SizeSystem.US and to_system == SizeSystem.AU:
        notes.append("AU uses dress size numbering for band sizes")
    elif from_system == SizeSystem.US and to_system == SizeSystem.FR:
        notes.append("French sizing adds 15cm to EU measurements")
    notes.append("Bra fit can vary between brands and regions")
    return notes
