"""Tests for confidence scores and notes."""

from size_converter.confidence import build_notes, score
from size_converter.types import Gender, SizeSystem, SizeType

US, UK, EU, JP, CM = SizeSystem.US, SizeSystem.UK, SizeSystem.EU, SizeSystem.JP, SizeSystem.CM
WOMEN_SPAN = (4.0, 18.0)


def test_path_scores():
    assert score("same_system", SizeType.SHOE, US, US, Gender.MEN) == 1.0
    assert score("formula", SizeType.CLOTHING, US, EU, Gender.MEN) == 0.85
    assert score("extrapolated", SizeType.SHOE, US, EU, Gender.MEN) == 0.7


def test_exact_baselines():
    assert score("exact", SizeType.RING, US, UK, Gender.UNISEX) == 0.98
    assert score("exact", SizeType.BRA, US, EU, Gender.WOMEN) == 0.95
    assert score("exact", SizeType.GLOVE, US, EU, Gender.UNISEX) == 0.9
    assert score("exact", SizeType.SWIMWEAR, US, EU, Gender.WOMEN) == 0.85
    assert score("exact", SizeType.WATCH, US, EU, Gender.UNISEX) == 1.0


def test_children_exact_score():
    assert score("exact", SizeType.CLOTHING, US, EU, Gender.INFANT) == 0.9


def test_footwear_adjustments():
    common = score("exact", SizeType.SHOE, US, EU, Gender.WOMEN, reference=9.0, reference_span=WOMEN_SPAN)
    japanese = score("exact", SizeType.SHOE, US, JP, Gender.WOMEN, reference=9.0, reference_span=WOMEN_SPAN)
    measured = score("exact", SizeType.SHOE, US, CM, Gender.WOMEN, reference=9.0, reference_span=WOMEN_SPAN)
    extreme = score("exact", SizeType.SHOE, US, JP, Gender.WOMEN, reference=4.0, reference_span=WOMEN_SPAN)

    assert common == 0.95
    assert japanese == 0.85
    assert measured == 0.9
    assert extreme == 0.75


def test_footwear_score_never_below_floor():
    value = score("exact", SizeType.SOCK, JP, CM, Gender.MEN, reference=18.0, reference_span=WOMEN_SPAN)
    assert value >= 0.5


def test_notes_per_path():
    assert build_notes("same_system", SizeType.SHOE, US, US, Gender.MEN) == "Same sizing system"
    assert (
        build_notes("formula", SizeType.CLOTHING, US, EU, Gender.MEN, formula="standard US to EU sizing (+10)")
        == "Converted using standard US to EU sizing (+10)"
    )
    assert build_notes("extrapolated", SizeType.SHOE, US, EU, Gender.MEN) == "Extended size - extrapolated conversion"


def test_footwear_notes():
    assert build_notes("exact", SizeType.SHOE, US, UK, Gender.MEN) == "UK sizes typically run 0.5 smaller than US"
    assert build_notes("exact", SizeType.SHOE, US, EU, Gender.WOMEN) == (
        "European sizes are consistent across most brands. "
        "Women's shoe sizing can vary significantly between brands"
    )


def test_notes_empty_for_plain_categories():
    assert build_notes("exact", SizeType.GLOVE, US, EU, Gender.UNISEX) is None


def test_extra_notes_come_first():
    notes = build_notes("exact", SizeType.BRA, US, UK, Gender.WOMEN, extra=["UK uses 'E' instead of 'DDD'"])
    assert notes == "UK uses 'E' instead of 'DDD'. Bra fit can vary between brands and regions"
