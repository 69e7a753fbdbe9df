"""Abstract base class for all stand builders.

Every archetype implements this interface. Builders are:
- Stateless: the output is a function of the build context alone
- Self-describing: each attaches the metadata the contract validator reads
- Composable: Corner and Rotating wrap the Tabletop builder's output
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any

from standgen.core.layout import grid_slots
from standgen.models import (
    BuildContext, BuildMetadata, BuiltStand, MaterialRole, NodeKind, PartType,
    Point3D, SceneNode, Size3D, StandSpec, StandType,
)

PRODUCT_CORNER_RADIUS = 0.1
SHELF_CORNER_RADIUS = 0.15


class StandBuilder(ABC):
    """
    Base class for all stand builders.

    The factory looks a builder up by `stand_type` in the registry and
    calls `build()` exactly once per request.
    """

    stand_type: StandType

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier (e.g., 'stand.tabletop')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Tabletop Stand Builder')."""
        ...

    @abstractmethod
    def build(self, context: BuildContext) -> BuiltStand:
        """Assemble the node tree and metadata for one stand."""
        ...


def box(
    name: str,
    part: PartType,
    role: MaterialRole,
    width: float,
    height: float,
    depth: float,
    x: float = 0.0,
    y: float = 0.0,
    z: float = 0.0,
    corner_radius: float = 0.0,
) -> SceneNode:
    return SceneNode(
        name=name,
        kind=NodeKind.ROUNDED_BOX if corner_radius > 0 else NodeKind.BOX,
        part=part,
        role=role,
        size=Size3D(width=width, height=height, depth=depth),
        corner_radius=corner_radius,
        position=Point3D(x=x, y=y, z=z),
    )


def cylinder(
    name: str,
    part: PartType,
    role: MaterialRole,
    radius: float,
    height: float,
    x: float = 0.0,
    y: float = 0.0,
    z: float = 0.0,
    rotation: Point3D | None = None,
) -> SceneNode:
    return SceneNode(
        name=name,
        kind=NodeKind.CYLINDER,
        part=part,
        role=role,
        radius=radius,
        size=Size3D(width=2 * radius, height=height, depth=2 * radius),
        position=Point3D(x=x, y=y, z=z),
        rotation=rotation or Point3D(),
    )


def group(name: str, children: list[SceneNode], part: PartType = PartType.ASSEMBLY) -> SceneNode:
    return SceneNode(name=name, kind=NodeKind.GROUP, part=part, children=children)


def product_grid(
    spec: StandSpec,
    front_face_count: int,
    back_to_back_count: int,
    surface_depth: float,
    surface_y: float,
    name_prefix: str,
    level_suffix: str,
    front_inset: float = 0.0,
) -> list[SceneNode]:
    """Product boxes for one surface, named `{prefix}_R{row}C{col}_{suffix}`."""
    product = spec.product
    return [
        box(
            f"{name_prefix}_R{slot.row + 1}C{slot.col + 1}_{level_suffix}",
            PartType.PRODUCT,
            MaterialRole.PRODUCT,
            product.width, product.height, product.depth,
            x=slot.x, y=slot.y, z=slot.z,
            corner_radius=PRODUCT_CORNER_RADIUS,
        )
        for slot in grid_slots(
            front_face_count,
            back_to_back_count,
            product,
            spec.layout.gaps_depth,
            surface_depth,
            surface_y,
            spec.stand.shelf_thickness,
            front_inset,
        )
    ]


def build_metadata(spec: StandSpec, total_products: int, **extras: Any) -> BuildMetadata:
    """Metadata record shared by every archetype; extras are archetype-specific."""
    return BuildMetadata(
        spec=spec,
        stand_dimensions={
            "width": spec.stand.width,
            "depth": spec.stand.depth,
            "height": spec.stand.height,
        },
        product_dimensions=spec.product,
        layout=spec.layout,
        total_products=total_products,
        front_face_count=spec.layout.columns,
        back_to_back_count=spec.layout.depth_count,
        shelf_count=spec.shelf_count,
        stand_type=spec.stand_type_label,
        generated=datetime.now(timezone.utc),
        **extras,
    )
