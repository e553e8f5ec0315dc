"""Category resolvers."""

from size_converter.resolvers.base import DEFAULT_TOLERANCE, BaseResolver
from size_converter.resolvers.belt import BeltResolver
from size_converter.resolvers.bra import BraResolver
from size_converter.resolvers.children import ChildrenResolver
from size_converter.resolvers.clothing import ClothingResolver
from size_converter.resolvers.glove import GloveResolver
from size_converter.resolvers.hat import HatResolver
from size_converter.resolvers.ring import RingResolver
from size_converter.resolvers.shoe import ShoeResolver
from size_converter.resolvers.sock import SockResolver
from size_converter.resolvers.swimwear import SwimwearResolver
from size_converter.resolvers.watch import WatchResolver
from size_converter.types import SizeType


def build_resolvers(tolerance: float = DEFAULT_TOLERANCE) -> dict[SizeType, BaseResolver]:
    """One resolver per size type; related types share an instance."""
    shoe = ShoeResolver(tolerance=tolerance)
    clothing = ClothingResolver(tolerance=tolerance)
    belt = BeltResolver(tolerance=tolerance)
    return {
        SizeType.SHOE: shoe,
        SizeType.CLOTHING: clothing,
        SizeType.DRESS: clothing,
        SizeType.JACKET: clothing,
        SizeType.BRA: BraResolver(tolerance=tolerance),
        SizeType.RING: RingResolver(tolerance=tolerance),
        SizeType.HAT: HatResolver(tolerance=tolerance),
        SizeType.GLOVE: GloveResolver(tolerance=tolerance),
        SizeType.BELT: belt,
        SizeType.PANTS: belt,
        SizeType.SOCK: SockResolver(shoe, tolerance=tolerance),
        SizeType.WATCH: WatchResolver(tolerance=tolerance),
        SizeType.SWIMWEAR: SwimwearResolver(tolerance=tolerance),
    }


__all__ = [
    "BaseResolver",
    "BeltResolver",
    "BraResolver",
    "ChildrenResolver",
    "ClothingResolver",
    "GloveResolver",
    "HatResolver",
    "RingResolver",
    "ShoeResolver",
    "SockResolver",
    "SwimwearResolver",
    "WatchResolver",
    "build_resolvers",
]
