"""Sizing systems, size types and audiences."""

from enum import Enum


class SizeSystem(str, Enum):
    """International sizing systems."""

    US = "US"
    UK = "UK"
    EU = "EU"
    FR = "FR"
    IT = "IT"
    JP = "JP"
    AU = "AU"
    CN = "CN"
    KR = "KR"
    CM = "CM"
    IN = "IN"

    @property
    def full_name(self) -> str:
        return _SYSTEM_NAMES[self]

    @property
    def is_measurement(self) -> bool:
        """Whether sizes in this system are physical lengths."""
        return self in (SizeSystem.CM, SizeSystem.IN)


_SYSTEM_NAMES = {
    SizeSystem.US: "United States",
    SizeSystem.UK: "United Kingdom",
    SizeSystem.EU: "European Union",
    SizeSystem.FR: "France",
    SizeSystem.IT: "Italy",
    SizeSystem.JP: "Japan",
    SizeSystem.AU: "Australia",
    SizeSystem.CN: "China",
    SizeSystem.KR: "South Korea",
    SizeSystem.CM: "Centimeters",
    SizeSystem.IN: "Inches",
}


class SizeType(str, Enum):
    """Types of clothing and accessories that can be converted."""

    SHOE = "shoe"
    CLOTHING = "clothing"
    DRESS = "dress"
    BRA = "bra"
    RING = "ring"
    HAT = "hat"
    GLOVE = "glove"
    BELT = "belt"
    PANTS = "pants"
    SOCK = "sock"
    WATCH = "watch"
    JACKET = "jacket"
    SWIMWEAR = "swimwear"

    @property
    def description(self) -> str:
        return f"{self.value.capitalize()} Size"


class Gender(str, Enum):
    """Audience a size is meant for."""

    MEN = "men"
    WOMEN = "women"
    UNISEX = "unisex"
    CHILDREN = "children"
    INFANT = "infant"
    TODDLER = "toddler"
    YOUTH = "youth"

    @property
    def description(self) -> str:
        return _GENDER_DESCRIPTIONS[self]

    @property
    def is_childrens(self) -> bool:
        return self in (Gender.CHILDREN, Gender.INFANT, Gender.TODDLER, Gender.YOUTH)


_GENDER_DESCRIPTIONS = {
    Gender.MEN: "Men's",
    Gender.WOMEN: "Women's",
    Gender.UNISEX: "Unisex",
    Gender.CHILDREN: "Children's",
    Gender.INFANT: "Infant",
    Gender.TODDLER: "Toddler",
    Gender.YOUTH: "Youth",
}
