"""Ring size resolver."""

from size_converter.resolvers.base import BaseResolver
from size_converter.types import SizeSystem, SizeType


class RingResolver(BaseResolver):
    category = "ring"
    size_type = SizeType.RING
    supported_systems = (
        SizeSystem.US,
        SizeSystem.UK,
        SizeSystem.EU,
        SizeSystem.JP,
        SizeSystem.IN,
        SizeSystem.CM,
    )
    common_sizes = ("6", "6.5", "7", "7.5", "8")
