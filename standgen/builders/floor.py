"""Floor stand with corner pillars and an oversized base.

Adds a back panel on tall stands and mid-span support brackets under
wide or deep shelves.
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

PILLAR_WIDTH = 3.0            # cm square pillars
BASE_OVERSIZE = 2.0           # Base is this much wider and deeper than the stand
MIN_BASE_HEIGHT = 4.0
BASE_CORNER_RADIUS = 0.3
BACK_PANEL_MIN_HEIGHT = 60.0  # Stands taller than this get a back panel
BACK_PANEL_THICKNESS = 1.0
BACK_PANEL_RATIO = 0.8
SUPPORT_MIN_WIDTH = 30.0      # Wider shelves get support brackets
SUPPORT_MIN_DEPTH = 40.0      # So do deeper ones
SUPPORT_WIDTH = 2.0


class FloorStandBuilder(StandBuilder):
    """Free-standing floor display."""

    stand_type = StandType.FLOOR

    def get_id(self) -> str:
        return "stand.floor"

    def get_name(self) -> str:
        return "Floor Stand Builder"

    def build(self, context: BuildContext) -> BuiltStand:
        spec = context.stand_spec
        w = spec.stand.width
        d = spec.stand.depth
        h = spec.stand.height
        t = spec.stand.shelf_thickness
        pw = PILLAR_WIDTH
        shelf_count = spec.shelf_count
        faces = spec.layout.columns
        backs = spec.layout.depth_count

        base_height = max(t * 2, MIN_BASE_HEIGHT)
        body = [box(
            "FloorBase", PartType.BASE, MaterialRole.STRUCTURE,
            w + BASE_OVERSIZE, base_height, d + BASE_OVERSIZE,
            y=base_height / 2, corner_radius=BASE_CORNER_RADIUS,
        )]

        # Pillars rise from the top of the base to the full stand height; a
        # stand no taller than its base gets pillars from the floor instead
        frame_bottom = base_height if h > base_height else 0.0
        pillar_height = h - frame_bottom
        pillar_y = frame_bottom + pillar_height / 2
        corners = [
            (-w / 2 + pw / 2, -d / 2 + pw / 2),   # Back left
            (w / 2 - pw / 2, -d / 2 + pw / 2),    # Back right
            (-w / 2 + pw / 2, d / 2 - pw / 2),    # Front left
            (w / 2 - pw / 2, d / 2 - pw / 2),     # Front right
        ]
        for index, (px, pz) in enumerate(corners):
            body.append(box(
                f"Pillar_{index + 1}", PartType.PILLAR, MaterialRole.STRUCTURE,
                pw, pillar_height, pw,
                x=px, y=pillar_y, z=pz,
            ))

        if h > BACK_PANEL_MIN_HEIGHT:
            body.append(box(
                "BackPanel", PartType.PANEL, MaterialRole.STRUCTURE,
                w - pw, pillar_height * BACK_PANEL_RATIO, BACK_PANEL_THICKNESS,
                y=pillar_y, z=-d / 2 + BACK_PANEL_THICKNESS / 2,
            ))

        spacing = (h - frame_bottom) / (shelf_count + 1)  # Headroom above the top shelf
        needs_supports = w > SUPPORT_MIN_WIDTH or d > SUPPORT_MIN_DEPTH
        shelves = []
        products = []
        for i in range(shelf_count):
            shelf_y = frame_bottom + (i + 1) * spacing
            shelves.append(box(
                f"FloorShelf_{i + 1}", PartType.SHELF, MaterialRole.SHELF,
                w - pw, t, d - pw,
                y=shelf_y, corner_radius=SHELF_CORNER_RADIUS,
            ))
            if needs_supports:
                for support_index, sx in enumerate((-w / 4, w / 4)):
                    shelves.append(box(
                        f"Support_Shelf{i + 1}_{support_index + 1}",
                        PartType.SUPPORT, MaterialRole.STRUCTURE,
                        SUPPORT_WIDTH, t, d - pw - SUPPORT_WIDTH,
                        x=sx, y=shelf_y - t / 2,
                    ))
            products.extend(product_grid(
                spec, faces, backs,
                surface_depth=d,
                surface_y=shelf_y,
                name_prefix="FloorProduct",
                level_suffix=f"Shelf{i + 1}",
                front_inset=pw / 2,
            ))

        total = total_products(faces, backs, shelf_count)
        logger.info(
            "Floor stand %gx%gx%gcm: %dx%d grid per shelf x %d shelves = %d products",
            w, d, h, faces, backs, shelf_count, total,
        )

        root = group("FloorStand", [
            *body,
            group("FloorShelves", shelves),
            group("FloorProducts", products),
        ])
        return BuiltStand(
            root=root,
            metadata=build_metadata(
                spec, total,
                base_height=base_height,
                pillar_support=len(corners),
            ),
            materials=context.material_list(),
        )
