"""Product placement on one shelf or tier surface.

Rows run across the stand front (X), columns run back-to-back into the
depth (Z). Every archetype places products through these functions.
"""

from __future__ import annotations
import math
from pydantic import BaseModel

from standgen.models import ProductDimensions

TIER_SHRINK = 0.15      # Each tier is 15% smaller than the one below
MIN_TIER_SCALE = 0.1    # Tiers never collapse to zero or negative size
FIT_TOLERANCE = 1e-9


class GridSlot(BaseModel):
    """Center of one product on a surface."""
    row: int      # 0-based, across the front
    col: int      # 0-based, front to back
    x: float
    y: float
    z: float


class TierGrid(BaseModel):
    """Resolved platform size and grid counts for one Multi-Tier level."""
    index: int
    scale: float
    width: float
    depth: float
    front_face_count: int
    back_to_back_count: int

    @property
    def product_count(self) -> int:
        return self.front_face_count * self.back_to_back_count


def row_position(row: int, front_face_count: int, product_width: float) -> float:
    """X center of a row; the rows are centered as a group."""
    return -((front_face_count - 1) * product_width) / 2 + row * product_width


def depth_position(
    col: int,
    surface_depth: float,
    product_depth: float,
    gaps_depth: float,
    front_inset: float = 0.0,
) -> float:
    """Z center of a depth-wise column; column 0 sits flush with the front edge."""
    front = surface_depth / 2 - product_depth / 2 - front_inset
    return front - col * (product_depth + gaps_depth)


def product_elevation(surface_y: float, shelf_thickness: float, product_height: float) -> float:
    """Y center of a product resting on a shelf whose center is at surface_y."""
    return surface_y + shelf_thickness / 2 + product_height / 2


def grid_slots(
    front_face_count: int,
    back_to_back_count: int,
    product: ProductDimensions,
    gaps_depth: float,
    surface_depth: float,
    surface_y: float,
    shelf_thickness: float,
    front_inset: float = 0.0,
) -> list[GridSlot]:
    """All product centers for one surface, row-major."""
    y = product_elevation(surface_y, shelf_thickness, product.height)
    slots: list[GridSlot] = []
    for row in range(front_face_count):
        x = row_position(row, front_face_count, product.width)
        for col in range(back_to_back_count):
            slots.append(GridSlot(
                row=row,
                col=col,
                x=x,
                y=y,
                z=depth_position(col, surface_depth, product.depth, gaps_depth, front_inset),
            ))
    return slots


def products_per_shelf(front_face_count: int, back_to_back_count: int) -> int:
    return front_face_count * back_to_back_count


def total_products(front_face_count: int, back_to_back_count: int, shelf_count: int) -> int:
    """Total for every archetype except Multi-Tier."""
    return products_per_shelf(front_face_count, back_to_back_count) * shelf_count


def tier_scale(tier_index: int) -> float:
    return max(MIN_TIER_SCALE, 1 - TIER_SHRINK * tier_index)


def scaled_count(count: int, scale: float) -> int:
    # Absorb float noise in count * scale before flooring
    return max(1, math.floor(round(count * scale, 9)))


def depth_capacity(surface_depth: float, product_depth: float, gaps_depth: float) -> int:
    """How many products fit front-to-back on a surface of the given depth."""
    return math.floor((surface_depth + gaps_depth + FIT_TOLERANCE) / (product_depth + gaps_depth))


def tier_grid(
    tier_index: int,
    stand_width: float,
    stand_depth: float,
    front_face_count: int,
    back_to_back_count: int,
    product: ProductDimensions,
    gaps_depth: float,
) -> TierGrid:
    """
    Platform size and grid counts for one tier.

    Counts shrink by floor(count * scale), at least 1. Above the base tier
    the depth-wise count is also capped at what fits the shrunken depth,
    and a platform shallower than one product is widened to hold it.
    """
    scale = tier_scale(tier_index)
    width = stand_width * scale
    depth = stand_depth * scale
    faces = scaled_count(front_face_count, scale)
    backs = scaled_count(back_to_back_count, scale)

    if tier_index > 0:
        if depth < product.depth:
            depth = product.depth
        backs = max(1, min(backs, depth_capacity(depth, product.depth, gaps_depth)))

    return TierGrid(
        index=tier_index,
        scale=scale,
        width=width,
        depth=depth,
        front_face_count=faces,
        back_to_back_count=backs,
    )
