"""Tests for ring, hat, glove, belt and watch resolvers."""

import pytest

from size_converter.resolvers import BeltResolver, GloveResolver, HatResolver, RingResolver, WatchResolver
from size_converter.types import SizeSystem

US, UK, EU, JP, CM, IN = (
    SizeSystem.US,
    SizeSystem.UK,
    SizeSystem.EU,
    SizeSystem.JP,
    SizeSystem.CM,
    SizeSystem.IN,
)


def test_ring_conversion():
    ring = RingResolver()

    result = ring.convert_with_details("7", US, UK)

    assert result.converted_size == "N"
    assert result.confidence == 0.98
    assert result.notes == "Ring sizing is based on internal circumference"
    assert ring.convert("N", UK, EU) == "52"
    assert ring.convert("7", US, JP) == "15"


def test_ring_out_of_table_is_invalid():
    assert RingResolver().convert_with_details("13", US, UK).error.kind == "invalid_size"


def test_hat_accepts_eighths():
    hat = HatResolver()

    result = hat.convert_with_details("7 1/8", US, EU)

    assert result.converted_size == "57"
    assert result.confidence == 0.95
    assert result.notes == "Hat sizing based on head circumference"
    assert hat.convert("7 1/4", US, IN) == "22.75"
    assert hat.is_valid("7 3/8", UK)


def test_hat_suggestions():
    hat = HatResolver()

    assert hat.get_suggestions("7 5/8", US) == ["7.625"]
    assert hat.get_suggestions("huge", US) == ["7", "7.125", "7.25", "7.5"]


@pytest.mark.parametrize(
    "size, from_system, to_system, expected",
    [("M", US, EU, "M"), ("8", US, EU, "M"), ("8", EU, US, "M"), ("XL", UK, EU, "XL")],
)
def test_glove_prefers_letter_sizes(size, from_system, to_system, expected):
    assert GloveResolver().convert(size, from_system, to_system) == expected


def test_glove_confidence():
    result = GloveResolver().convert_with_details("M", US, UK)

    assert result.confidence == 0.9
    assert result.notes is None


def test_belt_tabulated_sizes():
    belt = BeltResolver()

    result = belt.convert_with_details("34", US, EU)

    assert result.converted_size == "50"
    assert result.confidence == 0.9
    assert belt.convert("34", US, CM) == "86"
    assert belt.convert("50", EU, US) == "34"


def test_belt_odd_sizes_use_formula():
    belt = BeltResolver()

    to_eu = belt.convert_with_details("35", US, EU)
    from_cm = belt.convert_with_details("90", CM, US)

    assert to_eu.converted_size == "51"
    assert to_eu.confidence == 0.85
    assert to_eu.notes == "Converted using standard US to EU waist sizing (+16)"
    assert from_cm.converted_size == "35"
    assert from_cm.notes == "Converted using standard CM to US waist sizing (/2.54)"
    assert belt.convert("35", US, CM) == "88"


def test_belt_out_of_range_is_invalid():
    result = BeltResolver().convert_with_details("60", US, EU)

    assert result.error.kind == "invalid_size"


def test_belt_is_valid_accepts_any_size_in_range():
    belt = BeltResolver()

    assert belt.is_valid("31", US)
    assert belt.is_valid("47", EU)
    assert not belt.is_valid("52", US)
    assert not belt.is_valid("thirty", US)


def test_belt_same_system_odd_size():
    result = BeltResolver().convert_with_details("31", US, US)

    assert result.converted_size == "31"
    assert result.confidence == 1.0


def test_watch_sizes_are_universal():
    watch = WatchResolver()

    result = watch.convert_with_details("42mm", US, EU)

    assert result.converted_size == "42"
    assert result.confidence == 1.0


def test_watch_centimetres_use_table():
    assert WatchResolver().convert("4.2", CM, US) == "42"


def test_watch_rejects_uk():
    assert WatchResolver().convert_with_details("42", US, UK).error.kind == "unsupported_system"


def test_watch_is_valid():
    watch = WatchResolver()

    assert watch.is_valid("44MM", US)
    assert watch.is_valid("4.4", CM)
    assert not watch.is_valid("4.5", CM)
