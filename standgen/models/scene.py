"""Built stand output models."""

from __future__ import annotations
from datetime import datetime
from enum import Enum
from typing import Any, Iterator
from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel

from .geometry import Point3D, Size3D
from .materials import MaterialRole, SurfaceMaterial
from .spec import Layout, ProductDimensions
from .stand import StandSpec


class NodeKind(str, Enum):
    GROUP = "group"
    BOX = "box"
    ROUNDED_BOX = "rounded_box"
    CYLINDER = "cylinder"
    LINE = "line"


class PartType(str, Enum):
    ASSEMBLY = "assembly"
    BASE = "base"
    WALL = "wall"
    PILLAR = "pillar"
    PANEL = "panel"
    SHELF = "shelf"
    TIER = "tier"
    SUPPORT = "support"
    BRACKET = "bracket"
    ARM = "arm"
    TURNTABLE = "turntable"
    PRODUCT = "product"
    DIMENSION = "dimension"


class SceneNode(BaseModel):
    """
    One named node in the stand tree.

    Boxes use `size`, cylinders use `radius` + `size.height`, lines use
    `points`. Position and Euler rotation (radians) are relative to the
    parent node.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    kind: NodeKind = NodeKind.GROUP
    part: PartType = PartType.ASSEMBLY
    role: MaterialRole | None = None
    size: Size3D | None = None
    radius: float | None = None
    corner_radius: float = 0.0
    position: Point3D = Point3D()
    rotation: Point3D = Point3D()
    points: list[Point3D] = []
    children: list[SceneNode] = []
    metadata: dict[str, Any] = {}

    def iter_nodes(self) -> Iterator[SceneNode]:
        """Depth-first walk including this node."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def find(self, name: str) -> SceneNode | None:
        for node in self.iter_nodes():
            if node.name == name:
                return node
        return None

    def with_children(self, *extra: SceneNode) -> SceneNode:
        return self.model_copy(update={"children": [*self.children, *extra]})


class SceneStats(BaseModel):
    """Summary counts for a built stand."""
    total_nodes: int = 0
    products: int = 0
    shelves: int = 0
    supports: int = 0
    structure: int = 0

    @classmethod
    def from_root(cls, root: SceneNode) -> SceneStats:
        nodes = [
            n for n in root.iter_nodes()
            if n.kind != NodeKind.GROUP and n.part != PartType.DIMENSION
        ]
        products = sum(1 for n in nodes if n.part == PartType.PRODUCT)
        shelves = sum(1 for n in nodes if n.part in (PartType.SHELF, PartType.TIER))
        supports = sum(
            1 for n in nodes
            if n.part in (PartType.SUPPORT, PartType.ARM, PartType.BRACKET)
        )
        return cls(
            total_nodes=len(nodes),
            products=products,
            shelves=shelves,
            supports=supports,
            structure=len(nodes) - products - shelves - supports,
        )


class BuildMetadata(BaseModel):
    """What was actually built; the only channel the contract validator reads."""
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True,
    )

    spec: StandSpec
    stand_dimensions: dict[str, float]
    product_dimensions: ProductDimensions
    layout: Layout
    total_products: int
    front_face_count: int
    back_to_back_count: int
    shelf_count: int
    stand_type: str
    generated: datetime
    tier_count: int | None = None
    base_height: float | None = None       # Floor
    pillar_support: int | None = None      # Floor
    mounting_points: int | None = None     # Wall-Mount


class BuiltStand(BaseModel):
    """The complete built stand: node tree, metadata and shared materials."""
    model_config = ConfigDict(frozen=True)

    root: SceneNode
    metadata: BuildMetadata
    materials: list[SurfaceMaterial] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def stats(self) -> SceneStats:
        return SceneStats.from_root(self.root)

    def iter_nodes(self) -> Iterator[SceneNode]:
        return self.root.iter_nodes()

    def find(self, name: str) -> SceneNode | None:
        return self.root.find(name)

    def product_nodes(self) -> list[SceneNode]:
        return [n for n in self.iter_nodes() if n.part == PartType.PRODUCT]

    def nodes_of_part(self, part: PartType) -> list[SceneNode]:
        return [n for n in self.iter_nodes() if n.part == part]


SceneNode.model_rebuild()
