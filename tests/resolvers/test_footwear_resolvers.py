"""Tests for shoe and sock resolvers."""

import logging

from size_converter.repository import TableRepository
from size_converter.resolvers import ShoeResolver, SockResolver
from size_converter.types import Gender, SizeSystem, SizeType

US, UK, EU, JP, CM, FR = (
    SizeSystem.US,
    SizeSystem.UK,
    SizeSystem.EU,
    SizeSystem.JP,
    SizeSystem.CM,
    SizeSystem.FR,
)


def test_womens_shoe_us_to_eu():
    shoe = ShoeResolver()

    assert shoe.convert("9", US, EU, Gender.WOMEN) == "39"
    assert shoe.convert("9 1/2", US, EU, Gender.WOMEN) == "39.5"


def test_mens_shoe_eu_to_us():
    assert ShoeResolver().convert("42", EU, US, Gender.MEN) == "8.5"


def test_unisex_uses_mens_table():
    shoe = ShoeResolver()

    assert shoe.convert("10", US, UK, Gender.UNISEX) == shoe.convert("10", US, UK, Gender.MEN) == "9.5"


def test_exact_match_details():
    result = ShoeResolver().convert_with_details("9", US, EU, Gender.WOMEN)

    assert result.is_success
    assert result.confidence == 0.95
    assert result.size_type == SizeType.SHOE
    assert result.suggested_range is None
    assert "European sizes are consistent" in result.notes


def test_less_common_and_measurement_systems_lower_confidence():
    shoe = ShoeResolver()

    japanese = shoe.convert_with_details("9", US, JP, Gender.WOMEN)
    measured = shoe.convert_with_details("9", US, CM, Gender.WOMEN)

    assert japanese.converted_size == "26"
    assert japanese.confidence == 0.85
    assert measured.converted_size == "26"
    assert measured.confidence == 0.9


def test_same_system_returns_token_unchanged():
    result = ShoeResolver().convert_with_details("10", US, US, Gender.MEN)

    assert result.converted_size == "10"
    assert result.confidence == 1.0
    assert result.notes == "Same sizing system"


def test_same_system_rejects_unknown_token():
    result = ShoeResolver().convert_with_details("99", US, US, Gender.MEN)

    assert result.converted_size is None
    assert result.error.kind == "invalid_size"


def test_largest_tabulated_size_is_exact():
    result = ShoeResolver().convert_with_details("18", US, EU, Gender.MEN)

    assert result.converted_size == "53"
    assert result.confidence == 0.95


def test_size_beyond_target_table_is_extrapolated():
    result = ShoeResolver().convert_with_details("19", US, EU, Gender.MEN)

    assert result.converted_size == "54.0"
    assert result.confidence == 0.7
    assert result.suggested_range == "53.5 - 54.5"
    assert result.notes == "Extended size - extrapolated conversion"


def test_extrapolation_steps_by_table_increment():
    shoe = ShoeResolver()

    assert shoe.convert("20", US, EU, Gender.MEN) == "55.0"
    assert shoe.convert("19", US, JP, Gender.MEN) == "37.0"


def test_extrapolation_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="size_converter")

    ShoeResolver().convert("19", US, EU, Gender.MEN)

    assert "Extrapolated" in caplog.text


def test_size_below_target_table_is_out_of_range():
    tables = TableRepository(
        "shoe",
        data={"men": {"US": {"3": 3, "4": 4, "5": 5}, "EU": {"36": 4, "37": 5}}},
    )

    result = ShoeResolver(tables).convert_with_details("3", US, EU, Gender.MEN)

    assert result.converted_size is None
    assert result.error.kind == "size_out_of_range"
    assert result.error.valid_range == "3 - 5"


def test_invalid_shoe_size():
    result = ShoeResolver().convert_with_details("invalid", US, EU, Gender.MEN)

    assert result.converted_size is None
    assert result.confidence == 0.0
    assert result.error.kind == "invalid_size"
    assert result.notes == "Size not found in United States table"


def test_unsupported_system_names_offending_system():
    result = ShoeResolver().convert_with_details("9", US, FR, Gender.MEN)

    assert result.error.kind == "unsupported_system"
    assert result.error.system == FR


def test_shoe_is_valid():
    shoe = ShoeResolver()

    assert shoe.is_valid("9.5", US, Gender.WOMEN)
    assert shoe.is_valid("9 1/2", US, Gender.WOMEN)
    assert not shoe.is_valid("invalid", US, Gender.WOMEN)
    assert not shoe.is_valid("9", FR, Gender.WOMEN)


def test_shoe_suggestions_for_fraction():
    suggestions = ShoeResolver().get_suggestions("9 1/2", US, Gender.MEN)

    assert suggestions == ["9.5", "8.5", "9", "10", "10.5"]


def test_shoe_suggestions_for_non_numeric_input():
    assert ShoeResolver().get_suggestions("big", US, Gender.MEN) == []


def test_sock_delegates_to_shoe():
    result = SockResolver().convert_with_details("9", US, EU, Gender.MEN)

    assert result.converted_size == "42.5"
    assert result.size_type == SizeType.SOCK
    assert result.confidence == 0.95


def test_sock_shares_shoe_resolver():
    shoe = ShoeResolver()

    assert SockResolver(shoe).shoe is shoe


def test_sock_rejects_systems_shoes_support():
    result = SockResolver().convert_with_details("9", US, JP, Gender.MEN)

    assert result.error.kind == "unsupported_system"
    assert result.error.system == JP
    assert not SockResolver().is_valid("26", JP, Gender.MEN)


def test_sock_suggestions():
    assert SockResolver().get_suggestions("9", US) == ["6", "7", "8", "9", "10", "11", "12"]
