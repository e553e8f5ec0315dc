"""Glove size resolver."""

from size_converter.resolvers.base import BaseResolver
from size_converter.types import SizeSystem, SizeType


class GloveResolver(BaseResolver):
    """Glove sizes are quoted as letters first, so letters win ties."""

    category = "glove"
    size_type = SizeType.GLOVE
    supported_systems = (SizeSystem.US, SizeSystem.UK, SizeSystem.EU)
    prefer_numeric = False
    common_sizes = ("S", "M", "L", "XL")
