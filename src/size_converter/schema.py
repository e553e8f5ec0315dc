"""Data models for conversion results."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from size_converter.exceptions import ConversionFailedError
from size_converter.types import Gender, SizeSystem, SizeType

ErrorKind = Literal[
    "invalid_size",
    "unsupported_type",
    "unsupported_system",
    "unsupported_conversion",
    "ambiguous_size",
    "gender_required",
    "size_out_of_range",
    "invalid_format",
]


class ConversionError(BaseModel):
    """Reason a conversion could not be completed."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    size: str | None = None
    size_type: SizeType | None = None
    system: SizeSystem | None = None
    from_system: SizeSystem | None = None
    to_system: SizeSystem | None = None
    suggestions: list[str] = Field(default_factory=list)
    valid_range: str | None = None
    expected_format: str | None = None

    @classmethod
    def invalid_size(cls, size: str) -> "ConversionError":
        return cls(kind="invalid_size", size=size)

    @classmethod
    def unsupported_type(cls, size_type: SizeType | str) -> "ConversionError":
        return cls(kind="unsupported_type", size_type=_as_size_type(size_type))

    @classmethod
    def unsupported_system(cls, system: SizeSystem, size_type: SizeType) -> "ConversionError":
        return cls(kind="unsupported_system", system=system, size_type=size_type)

    @classmethod
    def unsupported_conversion(
        cls, from_system: SizeSystem, to_system: SizeSystem, size_type: SizeType
    ) -> "ConversionError":
        return cls(
            kind="unsupported_conversion",
            from_system=from_system,
            to_system=to_system,
            size_type=size_type,
        )

    @classmethod
    def ambiguous_size(cls, size: str, suggestions: list[str]) -> "ConversionError":
        return cls(kind="ambiguous_size", size=size, suggestions=list(suggestions))

    @classmethod
    def gender_required(cls, size_type: SizeType) -> "ConversionError":
        return cls(kind="gender_required", size_type=size_type)

    @classmethod
    def size_out_of_range(cls, size: str, valid_range: str) -> "ConversionError":
        return cls(kind="size_out_of_range", size=size, valid_range=valid_range)

    @classmethod
    def invalid_format(cls, size: str, expected_format: str) -> "ConversionError":
        return cls(kind="invalid_format", size=size, expected_format=expected_format)

    @property
    def description(self) -> str:
        """Technical description of the error."""
        if self.kind == "invalid_size":
            return f"Invalid size format: '{self.size}'"
        if self.kind == "unsupported_type":
            return f"Unsupported size type: {_type_value(self.size_type)}"
        if self.kind == "unsupported_system":
            return f"{self.system.value} sizing not supported for {self.size_type.value}"
        if self.kind == "unsupported_conversion":
            return (
                f"Cannot convert {self.size_type.value} "
                f"from {self.from_system.value} to {self.to_system.value}"
            )
        if self.kind == "ambiguous_size":
            return f"Ambiguous size '{self.size}'. Try: {', '.join(self.suggestions)}"
        if self.kind == "gender_required":
            return f"Gender context required for {self.size_type.value} conversion"
        if self.kind == "size_out_of_range":
            return f"Size '{self.size}' out of valid range: {self.valid_range}"
        return f"Invalid format '{self.size}'. Expected: {self.expected_format}"

    @property
    def user_message(self) -> str:
        """Friendly message suitable for end users."""
        if self.kind == "invalid_size":
            return f"'{self.size}' is not a valid size"
        if self.kind == "unsupported_type":
            label = self.size_type.description if self.size_type else "This size type"
            return f"{label} conversion not supported"
        if self.kind == "unsupported_system":
            return (
                f"{self.system.full_name} sizes not available for "
                f"{self.size_type.description.lower()}"
            )
        if self.kind == "unsupported_conversion":
            return (
                f"Can't convert {self.size_type.description.lower()} "
                f"from {self.from_system.full_name} to {self.to_system.full_name}"
            )
        if self.kind == "ambiguous_size":
            return f"Did you mean: {', '.join(self.suggestions[:3])}?"
        if self.kind == "gender_required":
            return f"Please specify gender for {self.size_type.description.lower()}"
        if self.kind == "size_out_of_range":
            return f"Size '{self.size}' not found. Available: {self.valid_range}"
        return f"Invalid format. Example: {self.expected_format}"


class ConversionResult(BaseModel):
    """Detailed conversion result with metadata."""

    model_config = ConfigDict(frozen=True)

    original_size: str
    converted_size: str | None = None
    from_system: SizeSystem
    to_system: SizeSystem
    size_type: SizeType
    gender: Gender
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    error: ConversionError | None = None
    notes: str | None = None
    suggested_range: str | None = None

    @property
    def is_success(self) -> bool:
        return self.converted_size is not None and self.error is None

    def raise_for_error(self) -> "ConversionResult":
        """Raise ConversionFailedError if the conversion failed."""
        if self.error is not None:
            raise ConversionFailedError(self.error.description, error=self.error)
        return self


class ConversionInfo(BaseModel):
    """Capabilities of the converter."""

    model_config = ConfigDict(frozen=True)

    supported_types: list[SizeType]
    supported_systems: list[SizeSystem]
    supported_genders: list[Gender]
    systems_by_type: dict[SizeType, list[SizeSystem]]
    description: str

    @computed_field
    @property
    def total_conversions(self) -> int:
        """Number of ordered (from, to) system pairs summed over size types."""
        return sum(len(systems) * (len(systems) - 1) for systems in self.systems_by_type.values())


def _as_size_type(value: SizeType | str) -> SizeType | None:
    try:
        return SizeType(value)
    except ValueError:
        return None


def _type_value(size_type: SizeType | None) -> str:
    return size_type.value if size_type else "unknown"
