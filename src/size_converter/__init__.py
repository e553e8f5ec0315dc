"""size-converter: Convert clothing and accessory sizes between international sizing systems."""

from size_converter.core import (
    ConverterConfig,
    SizeConverter,
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
from size_converter.normalization import normalize_size, normalize_sizes
from size_converter.schema import ConversionError, ConversionInfo, ConversionResult
from size_converter.types import Gender, SizeSystem, SizeType

__version__ = "0.1.0"

__all__ = [
    "convert",
    "convert_with_details",
    "convert_multiple",
    "is_valid",
    "get_suggestions",
    "conversion_info",
    "valid_sizes",
    "valid_size_count",
    "normalize_size",
    "normalize_sizes",
    "is_clothing_size",
    "SizeConverter",
    "ConverterConfig",
    "ConversionError",
    "ConversionInfo",
    "ConversionResult",
    "Gender",
    "SizeSystem",
    "SizeType",
    "__version__",
]
