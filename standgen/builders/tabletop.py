"""Tabletop stand: base, two side walls, back wall and an open front.

Shelves are spaced evenly across the height above the base and every
shelf carries the full product grid.
"""

from __future__ import annotations
import logging

from standgen.builders.base import (
    StandBuilder, box, group, product_grid, build_metadata, SHELF_CORNER_RADIUS,
)
from standgen.core.layout import total_products
from standgen.models import (
    BuildContext, BuiltStand, MaterialRole, PartType, StandType,
)

logger = logging.getLogger(__name__)

WALL_THICKNESS = 0.5  # 5mm walls
BASE_CORNER_RADIUS = 0.2


class TabletopStandBuilder(StandBuilder):
    """Counter-top stand with an open front."""

    stand_type = StandType.TABLETOP

    def get_id(self) -> str:
        return "stand.tabletop"

    def get_name(self) -> str:
        return "Tabletop Stand Builder"

    def build(self, context: BuildContext) -> BuiltStand:
        spec = context.stand_spec
        w = spec.stand.width
        d = spec.stand.depth
        h = spec.stand.height
        t = spec.stand.shelf_thickness
        wt = WALL_THICKNESS
        shelf_count = spec.shelf_count
        faces = spec.layout.columns
        backs = spec.layout.depth_count

        body = [
            box("Base", PartType.BASE, MaterialRole.STRUCTURE, w, t, d,
                y=t / 2, corner_radius=BASE_CORNER_RADIUS),
            box("LeftWall", PartType.WALL, MaterialRole.STRUCTURE, wt, h, d,
                x=-w / 2 + wt / 2, y=h / 2),
            box("RightWall", PartType.WALL, MaterialRole.STRUCTURE, wt, h, d,
                x=w / 2 - wt / 2, y=h / 2),
            box("BackWall", PartType.WALL, MaterialRole.STRUCTURE, w, h, wt,
                y=h / 2, z=-d / 2 + wt / 2),
        ]

        spacing = (h - t) / shelf_count
        shelves = []
        products = []
        for i in range(shelf_count):
            shelf_y = t + (i + 1) * spacing
            shelves.append(box(
                f"Shelf_{i + 1}", PartType.SHELF, MaterialRole.SHELF,
                w - wt, t, d - wt,
                y=shelf_y, corner_radius=SHELF_CORNER_RADIUS,
            ))
            products.extend(product_grid(
                spec, faces, backs,
                surface_depth=d,
                surface_y=shelf_y,
                name_prefix="Product",
                level_suffix=f"Shelf{i + 1}",
            ))

        total = total_products(faces, backs, shelf_count)
        logger.info(
            "Tabletop stand: %dx%d grid per shelf x %d shelves = %d products",
            faces, backs, shelf_count, total,
        )
        logger.debug("Tabletop shelf spacing %.1fcm", spacing)

        root = group("TabletopStand", [
            *body,
            group("Shelves", shelves),
            group("Products", products),
        ])
        return BuiltStand(
            root=root,
            metadata=build_metadata(spec, total),
            materials=context.material_list(),
        )
