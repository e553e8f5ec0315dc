"""Size conversion entry points."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Mapping

from size_converter.exceptions import UnsupportedTypeError
from size_converter.normalization import normalize_size
from size_converter.patterns import is_clothing_size as _looks_like_size
from size_converter.resolvers import BaseResolver, ChildrenResolver, build_resolvers
from size_converter.schema import ConversionError, ConversionInfo, ConversionResult
from size_converter.types import Gender, SizeSystem, SizeType

logger = logging.getLogger(__name__)

SystemInput = SizeSystem | str
TypeInput = SizeType | str
GenderInput = Gender | str


def _safe_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _safe_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class ConverterConfig:
    tolerance: float = 0.01
    batch_limit: int = 100

    @classmethod
    def from_env(cls) -> "ConverterConfig":
        tolerance = _safe_float(os.getenv("SIZE_CONVERTER_TOLERANCE"), 0.01)
        batch_limit = _safe_int(os.getenv("SIZE_CONVERTER_BATCH_LIMIT"), 100)
        return cls(
            tolerance=tolerance if tolerance > 0 else 0.01,
            batch_limit=batch_limit if batch_limit > 0 else 100,
        )


def _system(value: SystemInput) -> SizeSystem:
    return value if isinstance(value, SizeSystem) else SizeSystem(value.strip().upper())


def _size_type(value: TypeInput) -> SizeType:
    return value if isinstance(value, SizeType) else SizeType(value.strip().lower())


def _gender(value: GenderInput) -> Gender:
    return value if isinstance(value, Gender) else Gender(value.strip().lower())


class SizeConverter:
    """Routes conversions to the resolver for a size type and audience.

    Children's audiences (children, infant, toddler, youth) always use the
    children's resolver, whatever the size type.
    """

    def __init__(
        self,
        config: ConverterConfig | None = None,
        *,
        resolvers: Mapping[SizeType, BaseResolver] | None = None,
    ):
        self.config = config or ConverterConfig()
        self.resolvers = dict(resolvers) if resolvers is not None else build_resolvers(self.config.tolerance)
        self.children = ChildrenResolver(tolerance=self.config.tolerance)

    def resolver_for(self, size_type: SizeType, gender: Gender = Gender.UNISEX) -> BaseResolver:
        if gender.is_childrens:
            return self.children
        try:
            return self.resolvers[size_type]
        except KeyError:
            raise UnsupportedTypeError(f"No resolver registered for {size_type.value}") from None

    def convert(
        self,
        size: str,
        from_system: SystemInput,
        to_system: SystemInput,
        size_type: TypeInput,
        gender: GenderInput = Gender.UNISEX,
    ) -> str | None:
        """Convert a size, returning None if it cannot be converted."""
        return self.convert_with_details(size, from_system, to_system, size_type, gender).converted_size

    def convert_with_details(
        self,
        size: str,
        from_system: SystemInput,
        to_system: SystemInput,
        size_type: TypeInput,
        gender: GenderInput = Gender.UNISEX,
    ) -> ConversionResult:
        """Convert a size and describe how the result was obtained.

        Args:
            size: Size as written, e.g. "9 1/2", "34DD" or "Large".
            from_system: Sizing system the size is written in.
            to_system: Sizing system to convert to.
            size_type: Kind of garment or accessory.
            gender: Audience the size is meant for.

        Returns:
            ConversionResult. Failures carry ``error`` and no converted size.
        """
        from_system, to_system = _system(from_system), _system(to_system)
        size_type, gender = _size_type(size_type), _gender(gender)

        try:
            resolver = self.resolver_for(size_type, gender)
        except UnsupportedTypeError as e:
            logger.warning("%s", e)
            return ConversionResult(
                original_size=size,
                from_system=from_system,
                to_system=to_system,
                size_type=size_type,
                gender=gender,
                error=ConversionError.unsupported_type(size_type),
            )
        return resolver.convert_with_details(size, from_system, to_system, gender, size_type)

    def convert_multiple(
        self,
        sizes: Iterable[str],
        from_system: SystemInput,
        to_system: SystemInput,
        size_type: TypeInput,
        gender: GenderInput = Gender.UNISEX,
    ) -> list[str | None]:
        """Convert sizes in order; only the first ``batch_limit`` are processed."""
        batch = list(sizes)[: self.config.batch_limit]
        return [self.convert(size, from_system, to_system, size_type, gender) for size in batch]

    def is_valid(
        self,
        size: str,
        size_type: TypeInput,
        system: SystemInput,
        gender: GenderInput = Gender.UNISEX,
    ) -> bool:
        size_type, system, gender = _size_type(size_type), _system(system), _gender(gender)
        try:
            resolver = self.resolver_for(size_type, gender)
        except UnsupportedTypeError:
            return False
        return system in resolver.supported_systems and resolver.is_valid(size, system, gender)

    def get_suggestions(
        self,
        size: str,
        size_type: TypeInput,
        system: SystemInput,
        gender: GenderInput = Gender.UNISEX,
    ) -> list[str]:
        size_type, system, gender = _size_type(size_type), _system(system), _gender(gender)
        try:
            resolver = self.resolver_for(size_type, gender)
        except UnsupportedTypeError:
            return []
        return resolver.get_suggestions(size, system, gender)

    def conversion_info(self) -> ConversionInfo:
        systems_by_type = {
            size_type: list(self.resolvers[size_type].supported_systems)
            for size_type in SizeType
            if size_type in self.resolvers
        }
        return ConversionInfo(
            supported_types=list(systems_by_type),
            supported_systems=list(SizeSystem),
            supported_genders=list(Gender),
            systems_by_type=systems_by_type,
            description="International clothing and accessory size conversion",
        )

    def valid_sizes(
        self,
        sizes: Iterable[str],
        size_type: TypeInput,
        system: SystemInput,
        gender: GenderInput = Gender.UNISEX,
    ) -> list[str]:
        return [size for size in sizes if self.is_valid(size, size_type, system, gender)]

    def valid_size_count(
        self,
        sizes: Iterable[str],
        size_type: TypeInput,
        system: SystemInput,
        gender: GenderInput = Gender.UNISEX,
    ) -> int:
        return len(self.valid_sizes(sizes, size_type, system, gender))


@lru_cache(maxsize=1)
def default_converter() -> SizeConverter:
    """Shared converter configured from the environment."""
    return SizeConverter(ConverterConfig.from_env())


def convert(
    size: str,
    from_system: SystemInput,
    to_system: SystemInput,
    size_type: TypeInput,
    gender: GenderInput = Gender.UNISEX,
) -> str | None:
    """Convert a size between sizing systems.

    Returns None if the size cannot be converted; use convert_with_details
    to find out why.
    """
    return default_converter().convert(size, from_system, to_system, size_type, gender)


def convert_with_details(
    size: str,
    from_system: SystemInput,
    to_system: SystemInput,
    size_type: TypeInput,
    gender: GenderInput = Gender.UNISEX,
) -> ConversionResult:
    return default_converter().convert_with_details(size, from_system, to_system, size_type, gender)


def convert_multiple(
    sizes: Iterable[str],
    from_system: SystemInput,
    to_system: SystemInput,
    size_type: TypeInput,
    gender: GenderInput = Gender.UNISEX,
) -> list[str | None]:
    return default_converter().convert_multiple(sizes, from_system, to_system, size_type, gender)


def is_valid(size: str, size_type: TypeInput, system: SystemInput, gender: GenderInput = Gender.UNISEX) -> bool:
    return default_converter().is_valid(size, size_type, system, gender)


def get_suggestions(
    size: str, size_type: TypeInput, system: SystemInput, gender: GenderInput = Gender.UNISEX
) -> list[str]:
    return default_converter().get_suggestions(size, size_type, system, gender)


def conversion_info() -> ConversionInfo:
    return default_converter().conversion_info()


def valid_sizes(
    sizes: Iterable[str], size_type: TypeInput, system: SystemInput, gender: GenderInput = Gender.UNISEX
) -> list[str]:
    return default_converter().valid_sizes(sizes, size_type, system, gender)


def valid_size_count(
    sizes: Iterable[str], size_type: TypeInput, system: SystemInput, gender: GenderInput = Gender.UNISEX
) -> int:
    return default_converter().valid_size_count(sizes, size_type, system, gender)


def is_clothing_size(size: str) -> bool:
    """Whether a string looks like a size of any kind."""
    return _looks_like_size(normalize_size(size))
