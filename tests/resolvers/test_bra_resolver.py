"""Tests for the bra resolver."""

from size_converter.repository import TableRepository
from size_converter.resolvers import BraResolver
from size_converter.types import Gender, SizeSystem

US, UK, EU, AU = SizeSystem.US, SizeSystem.UK, SizeSystem.EU, SizeSystem.AU


def test_band_and_cup_convert_independently():
    bra = BraResolver()

    assert bra.convert("34B", US, EU) == "75B"
    assert bra.convert("36C", US, AU) == "14C"
    assert bra.convert("75B", EU, US) == "34B"


def test_bra_result_is_always_womens():
    result = BraResolver().convert_with_details("34B", US, EU, Gender.MEN)

    assert result.gender == Gender.WOMEN
    assert result.confidence == 0.95


def test_ddd_cup_becomes_e_in_uk():
    result = BraResolver().convert_with_details("34DDD", US, UK)

    assert result.converted_size == "34E"
    assert result.notes.startswith("UK uses 'E' instead of 'DDD'")


def test_dd_cup_becomes_e_in_eu():
    result = BraResolver().convert_with_details("34DD", US, EU)

    assert result.converted_size == "75E"
    assert "EU uses 'E' for DD cup sizes" in result.notes
    assert "EU uses centimeter measurements for band sizes" in result.notes


def test_other_cup_changes_are_noted():
    result = BraResolver().convert_with_details("34G", US, UK)

    assert result.converted_size == "34FF"
    assert "Cup designation changed from 'G' to 'FF'" in result.notes


def test_unparseable_bra_size_is_invalid_format():
    result = BraResolver().convert_with_details("large", US, EU)

    assert result.error.kind == "invalid_format"
    assert result.error.expected_format == "34B"


def test_unknown_cup_in_source_system_is_invalid_size():
    result = BraResolver().convert_with_details("34H", US, EU)

    assert result.error.kind == "invalid_size"
    assert result.converted_size is None


def test_missing_target_component_is_out_of_range():
    tables = TableRepository(
        "bra",
        data={
            "band": {"US": {"34": 34}, "EU": {"75": 34}},
            "cup": {"US": {"A": 1, "G": 8}, "EU": {"A": 1}},
        },
    )

    result = BraResolver(tables).convert_with_details("34G", US, EU)

    assert result.converted_size is None
    assert result.error.kind == "size_out_of_range"
    assert result.error.valid_range == "34A-34G"


def test_bra_is_valid():
    bra = BraResolver()

    assert bra.is_valid("34B", US)
    assert bra.is_valid("34E", UK)
    assert not bra.is_valid("34E", US)
    assert not bra.is_valid("B34", US)


def test_bra_same_system():
    result = BraResolver().convert_with_details("34b", US, US)

    assert result.converted_size == "34B"
    assert result.confidence == 1.0
