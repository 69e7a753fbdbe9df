"""Multi-tier stand, a stack of shrinking platforms that each act as a shelf.

Tier t is scaled by 1 - 0.15t and holds a floored, scaled-down grid, so
the total product count is summed per tier rather than multiplied.
"""

from __future__ import annotations
import logging

from standgen.builders.base import StandBuilder, box, group, product_grid, build_metadata
from standgen.core.layout import tier_grid
from standgen.models import (
    BuildContext, BuiltStand, MaterialRole, PartType, StandType,
)

logger = logging.getLogger(__name__)

TIER_CORNER_RADIUS = 0.2


class MultiTierStandBuilder(StandBuilder):
    """Pyramid of stacked tiers."""

    stand_type = StandType.MULTI_TIER

    def get_id(self) -> str:
        return "stand.multi_tier"

    def get_name(self) -> str:
        return "Multi-tier Stand Builder"

    def build(self, context: BuildContext) -> BuiltStand:
        spec = context.stand_spec
        w = spec.stand.width
        d = spec.stand.depth
        h = spec.stand.height
        t = spec.stand.shelf_thickness
        tier_count = spec.shelf_count
        tier_height = h / tier_count

        children = []
        total = 0
        for index in range(tier_count):
            tier = tier_grid(
                index, w, d,
                spec.layout.columns,
                spec.layout.depth_count,
                spec.product,
                spec.layout.gaps_depth,
            )
            tier_y = index * tier_height
            total += tier.product_count
            logger.debug(
                "Tier %d: %dx%d grid = %d products (scale %.2f)",
                index + 1, tier.front_face_count, tier.back_to_back_count,
                tier.product_count, tier.scale,
            )

            children.append(box(
                f"Tier_{index + 1}_Base", PartType.TIER, MaterialRole.SHELF,
                tier.width, t, tier.depth,
                y=tier_y + t / 2, corner_radius=TIER_CORNER_RADIUS,
            ))
            children.extend(product_grid(
                spec,
                tier.front_face_count,
                tier.back_to_back_count,
                surface_depth=tier.depth,
                surface_y=tier_y + t / 2,
                name_prefix="TierProduct",
                level_suffix=f"Tier{index + 1}",
            ))

        logger.info("Multi-tier stand: %d products across %d tiers", total, tier_count)

        return BuiltStand(
            root=group("MultiTierStand", children),
            metadata=build_metadata(spec, total, tier_count=tier_count),
            materials=context.material_list(),
        )
