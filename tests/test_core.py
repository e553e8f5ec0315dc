"""Tests for the conversion entry points."""

import logging

import pytest

from size_converter import (
    ConversionResult,
    ConverterConfig,
    Gender,
    SizeConverter,
    SizeSystem,
    SizeType,
    conversion_info,
    convert,
    convert_multiple,
    convert_with_details,
    get_suggestions,
    is_clothing_size,
    is_valid,
    valid_size_count,
    valid_sizes,
)
from size_converter.core import default_converter
from size_converter.exceptions import ConversionFailedError

US, UK, EU = SizeSystem.US, SizeSystem.UK, SizeSystem.EU


def test_convert_womens_shoe():
    assert convert("9", US, EU, SizeType.SHOE, Gender.WOMEN) == "39"
    assert convert("9.5", US, EU, SizeType.SHOE, Gender.WOMEN) == "39.5"


def test_convert_accepts_strings():
    assert convert("9", "us", "EU", "Shoe", "women") == "39"


def test_convert_rejects_unknown_strings():
    with pytest.raises(ValueError):
        convert("9", "XX", "EU", "shoe")


def test_convert_invalid_returns_none():
    assert convert("invalid", US, EU, SizeType.SHOE) is None

    result = convert_with_details("invalid", US, EU, SizeType.SHOE)
    assert result.error.kind == "invalid_size"


def test_convert_bra():
    assert convert("34B", US, EU, SizeType.BRA) == "75B"
    assert convert("34DDD", US, UK, SizeType.BRA) == "34E"


def test_dress_and_jacket_use_clothing_tables():
    assert convert("38", US, EU, SizeType.JACKET, Gender.MEN) == "48"

    result = convert_with_details("M", US, EU, SizeType.DRESS, Gender.WOMEN)
    assert result.converted_size == "40"
    assert result.size_type == SizeType.DRESS


def test_pants_use_belt_sizes():
    assert convert("35", US, EU, SizeType.PANTS) == "51"


def test_formula_conversion_details():
    result = convert_with_details("54", US, EU, SizeType.CLOTHING, Gender.MEN)

    assert result.converted_size == "64"
    assert result.confidence == 0.85
    assert "standard US to EU sizing (+10)" in result.notes


def test_boundary_and_extrapolation():
    exact = convert_with_details("18", US, EU, SizeType.SHOE, Gender.MEN)
    extended = convert_with_details("19", US, EU, SizeType.SHOE, Gender.MEN)

    assert exact.converted_size == "53"
    assert exact.confidence == 0.95
    assert extended.converted_size == "54.0"
    assert extended.confidence == 0.7


def test_childrens_audience_routes_to_children_sizes():
    result = convert_with_details("3M", US, EU, SizeType.SHOE, Gender.INFANT)

    assert result.converted_size == "56"
    assert result.size_type == SizeType.SHOE
    assert result.gender == Gender.INFANT
    assert result.confidence == 0.9


def test_round_trip():
    forward = convert("10", US, EU, SizeType.SHOE, Gender.MEN)
    assert convert(forward, EU, US, SizeType.SHOE, Gender.MEN) == "10"


def test_conversion_is_deterministic():
    first = convert_with_details("M", US, EU, SizeType.SWIMWEAR, Gender.WOMEN)
    second = convert_with_details("M", US, EU, SizeType.SWIMWEAR, Gender.WOMEN)

    assert first == second
    assert first.converted_size == "36"


def test_convert_multiple_keeps_order():
    assert convert_multiple(["8", "9", "bogus", "10"], US, EU, SizeType.SHOE, Gender.MEN) == [
        "41",
        "42.5",
        None,
        "44",
    ]


def test_convert_multiple_truncates_to_batch_limit():
    results = convert_multiple(["9"] * 150, US, EU, SizeType.SHOE, Gender.MEN)

    assert len(results) == 100
    assert set(results) == {"42.5"}


def test_batch_limit_from_config():
    converter = SizeConverter(ConverterConfig(batch_limit=5))

    assert len(converter.convert_multiple(["9"] * 10, US, EU, SizeType.SHOE)) == 5


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("SIZE_CONVERTER_TOLERANCE", "0.05")
    monkeypatch.setenv("SIZE_CONVERTER_BATCH_LIMIT", "25")

    config = ConverterConfig.from_env()

    assert config.tolerance == 0.05
    assert config.batch_limit == 25


def test_config_from_env_ignores_bad_values(monkeypatch):
    monkeypatch.setenv("SIZE_CONVERTER_TOLERANCE", "-1")
    monkeypatch.setenv("SIZE_CONVERTER_BATCH_LIMIT", "many")

    assert ConverterConfig.from_env() == ConverterConfig()


def test_unregistered_size_type_is_unsupported(caplog):
    converter = SizeConverter(resolvers={})

    with caplog.at_level(logging.WARNING, logger="size_converter"):
        result = converter.convert_with_details("9", US, EU, SizeType.SHOE, Gender.MEN)

    assert result.converted_size is None
    assert result.error.kind == "unsupported_type"
    assert result.error.size_type == SizeType.SHOE
    assert "No resolver registered for shoe" in caplog.text
    assert not converter.is_valid("9", SizeType.SHOE, US)
    assert converter.get_suggestions("9", SizeType.SHOE, US) == []


def test_is_valid():
    assert is_valid("9.5", SizeType.SHOE, US)
    assert not is_valid("invalid", SizeType.SHOE, US)
    assert not is_valid("9", SizeType.SHOE, SizeSystem.FR)
    assert is_valid("34B", SizeType.BRA, US)
    assert is_valid("2T", SizeType.CLOTHING, US, Gender.TODDLER)


def test_get_suggestions():
    assert "9.5" in get_suggestions("9 1/2", SizeType.SHOE, US)
    assert get_suggestions("7", SizeType.RING, US) == ["6", "6.5", "7", "7.5", "8"]


def test_conversion_info():
    info = conversion_info()

    assert len(info.supported_types) == 13
    assert len(info.supported_systems) == 11
    assert len(info.supported_genders) == 7
    assert len(info.systems_by_type[SizeType.SHOE]) == 6
    assert info.systems_by_type[SizeType.GLOVE] == [US, UK, EU]
    assert info.total_conversions == 260


def test_collection_helpers():
    sizes = ["9", "invalid", "10.5", "99"]

    assert valid_sizes(sizes, SizeType.SHOE, US, Gender.MEN) == ["9", "10.5"]
    assert valid_size_count(sizes, SizeType.SHOE, US, Gender.MEN) == 2


def test_is_clothing_size():
    assert is_clothing_size("large")
    assert is_clothing_size("9 1/2")
    assert not is_clothing_size("hello")


def test_raise_for_error():
    with pytest.raises(ConversionFailedError) as excinfo:
        convert_with_details("invalid", US, EU, SizeType.SHOE).raise_for_error()

    assert excinfo.value.error.kind == "invalid_size"
    assert "Invalid size format" in str(excinfo.value)


def test_default_converter_is_shared():
    assert default_converter() is default_converter()


def test_module_functions_use_default_converter(mocker):
    mock_converter = mocker.MagicMock()
    mock_converter.convert.return_value = "42"
    mocker.patch("size_converter.core.default_converter", return_value=mock_converter)

    assert convert("9", US, EU, SizeType.SHOE) == "42"
    mock_converter.convert.assert_called_once_with("9", US, EU, SizeType.SHOE, Gender.UNISEX)


def test_convert_with_details_returns_result_model():
    result = convert_with_details("7", US, UK, SizeType.RING)

    assert isinstance(result, ConversionResult)
    assert result.is_success
