"""Wall-mount stand: back plate, mount brackets and cantilevered shelves."""

from __future__ import annotations
import logging
import math

from standgen.builders.base import (
    StandBuilder, box, cylinder, group, product_grid, build_metadata,
    SHELF_CORNER_RADIUS,
)
from standgen.core.layout import total_products
from standgen.models import (
    BuildContext, BuiltStand, MaterialRole, PartType, Point3D, StandType,
)

logger = logging.getLogger(__name__)

BACK_PLATE_THICKNESS = 1.0
MAX_BRACKET_SIZE = 4.0
BRACKET_LENGTH = 0.5
SHELF_WIDTH_RATIO = 0.9       # Cantilevered shelves are narrower than the plate
ARM_WIDTH = 2.0
ARM_HEIGHT = 1.0


class WallMountStandBuilder(StandBuilder):
    """Wall-hung stand without a base platform."""

    stand_type = StandType.WALL_MOUNT

    def get_id(self) -> str:
        return "stand.wall_mount"

    def get_name(self) -> str:
        return "Wall Mount Stand Builder"

    def build(self, context: BuildContext) -> BuiltStand:
        spec = context.stand_spec
        w = spec.stand.width
        d = spec.stand.depth
        h = spec.stand.height
        t = spec.stand.shelf_thickness
        shelf_count = spec.shelf_count
        faces = spec.layout.columns
        backs = spec.layout.depth_count

        plate_z = -d / 2 - BACK_PLATE_THICKNESS / 2
        body = [box(
            "WallBackPlate", PartType.PANEL, MaterialRole.STRUCTURE,
            w, h, BACK_PLATE_THICKNESS,
            y=h / 2, z=plate_z,
        )]

        bracket_size = min(w / 8, MAX_BRACKET_SIZE)
        mount_points = [
            (-w / 3, h * 0.8),
            (w / 3, h * 0.8),
            (-w / 3, h * 0.2),
            (w / 3, h * 0.2),
        ]
        for index, (bx, by) in enumerate(mount_points):
            body.append(cylinder(
                f"MountBracket_{index + 1}", PartType.BRACKET, MaterialRole.STRUCTURE,
                radius=bracket_size / 2, height=BRACKET_LENGTH,
                x=bx, y=by, z=plate_z,
                rotation=Point3D(x=math.pi / 2),
            ))

        spacing = h / (shelf_count + 1)
        shelves = []
        products = []
        for i in range(shelf_count):
            shelf_y = (i + 1) * spacing
            shelves.append(box(
                f"WallShelf_{i + 1}", PartType.SHELF, MaterialRole.SHELF,
                w * SHELF_WIDTH_RATIO, t, d,
                y=shelf_y, corner_radius=SHELF_CORNER_RADIUS,
            ))
            # Arms run from the back plate under the shelf
            for arm_index, ax in enumerate((-w / 3, w / 3)):
                shelves.append(box(
                    f"SupportArm_Shelf{i + 1}_{arm_index + 1}",
                    PartType.ARM, MaterialRole.STRUCTURE,
                    ARM_WIDTH, ARM_HEIGHT, d + BACK_PLATE_THICKNESS,
                    x=ax, y=shelf_y - t / 2, z=-BACK_PLATE_THICKNESS / 2,
                ))
            products.extend(product_grid(
                spec, faces, backs,
                surface_depth=d,
                surface_y=shelf_y,
                name_prefix="WallProduct",
                level_suffix=f"Shelf{i + 1}",
            ))

        total = total_products(faces, backs, shelf_count)
        logger.info(
            "Wall mount stand %gx%gx%gcm: %d shelves, %d products, %d mount points",
            w, d, h, shelf_count, total, len(mount_points),
        )

        root = group("WallMountStand", [
            *body,
            group("WallShelves", shelves),
            group("WallProducts", products),
        ])
        return BuiltStand(
            root=root,
            metadata=build_metadata(spec, total, mounting_points=len(mount_points)),
            materials=context.material_list(),
        )
