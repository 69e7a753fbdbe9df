"""Tests for the six stand builders."""
import math

import pytest

from standgen.core.generator import build_stand_group
from standgen.models import (
    Layout, MaterialRole, NodeKind, PartType, ProductDimensions, Spec, StandDimensions,
)

from conftest import NON_TIERED_STAND_TYPES


def build(spec, stand_type, shelf_count=1, **extra):
    form = {"standType": stand_type, "shelfCount": shelf_count, **extra}
    return build_stand_group(spec, form, seed=3)


class TestProductCounts:

    @pytest.mark.parametrize("stand_type", NON_TIERED_STAND_TYPES)
    @pytest.mark.parametrize("shelf_count", [1, 2, 4])
    def test_non_tiered_total(self, wide_spec, stand_type, shelf_count):
        built = build(wide_spec, stand_type, shelf_count)
        expected = wide_spec.layout.columns * wide_spec.layout.depth_count * shelf_count
        assert built.metadata.total_products == expected
        assert len(built.product_nodes()) == expected

    def test_multi_tier_default_three_tiers(self, spec_a):
        built = build(spec_a, "Multi-tier Stand", 3)
        assert built.metadata.total_products == 30
        assert len(built.product_nodes()) == 30
        assert built.metadata.tier_count == 3
        assert built.metadata.shelf_count == 3

    def test_multi_tier_is_not_multiplied(self, spec_a):
        built = build(spec_a, "Multi-tier Stand", 3)
        naive = spec_a.layout.columns * spec_a.layout.depth_count * 3
        assert built.metadata.total_products != naive

    def test_metadata_echo(self, wide_spec):
        built = build(wide_spec, "Floor Stand", 2)
        meta = built.metadata
        assert meta.front_face_count == 3
        assert meta.back_to_back_count == 4
        assert meta.stand_dimensions == {"width": 45, "depth": 50, "height": 90}
        assert meta.product_dimensions == wide_spec.product
        assert meta.layout == wide_spec.layout
        assert meta.spec.stand == wide_spec.stand
        assert meta.stand_type == "Floor Stand"


class TestTabletop:

    def test_structure(self, built_tabletop):
        root = built_tabletop.root
        assert root.name == "TabletopStand"
        for name in ("Base", "LeftWall", "RightWall", "BackWall", "Shelves", "Products"):
            assert root.find(name) is not None
        assert root.find("FrontWall") is None

    def test_walls_and_base(self, built_tabletop):
        left = built_tabletop.find("LeftWall")
        assert left.size.width == 0.5
        assert left.size.height == 30
        assert left.position.x == pytest.approx(-7.25)
        back = built_tabletop.find("BackWall")
        assert back.position.z == pytest.approx(-14.75)
        base = built_tabletop.find("Base")
        assert base.position.y == pytest.approx(1)
        assert base.kind == NodeKind.ROUNDED_BOX

    def test_shelf_spacing(self, spec_a):
        built = build(spec_a, "Tabletop Stand", 2)
        # (30 - 2) / 2 = 14 spacing above the base
        assert built.find("Shelf_1").position.y == pytest.approx(16)
        assert built.find("Shelf_2").position.y == pytest.approx(30)
        assert built.find("Shelf_1").size.width == pytest.approx(14.5)

    def test_products_rest_on_shelf(self, built_tabletop):
        product = built_tabletop.find("Product_R1C1_Shelf1")
        # shelf at 30, half shelf 1, half product 2.5
        assert product.position.y == pytest.approx(33.5)
        assert product.position.z == pytest.approx(13.75)
        last = built_tabletop.find("Product_R1C12_Shelf1")
        assert last.position.z == pytest.approx(-13.75)

    def test_materials_by_role(self, built_tabletop):
        roles = {m.role for m in built_tabletop.materials}
        assert roles == set(MaterialRole)
        for node in built_tabletop.iter_nodes():
            if node.part == PartType.PRODUCT:
                assert node.role == MaterialRole.PRODUCT
            elif node.part == PartType.SHELF:
                assert node.role == MaterialRole.SHELF
            elif node.kind != NodeKind.GROUP:
                assert node.role == MaterialRole.STRUCTURE

    def test_stats(self, built_tabletop):
        stats = built_tabletop.stats
        assert stats.products == 12
        assert stats.shelves == 1
        assert stats.structure == 4


class TestFloor:

    def test_base_and_pillars(self, wide_spec):
        built = build(wide_spec, "Floor Stand", 2)
        base = built.find("FloorBase")
        assert base.size.width == 47
        assert base.size.depth == 52
        assert base.size.height == 4
        pillars = built.nodes_of_part(PartType.PILLAR)
        assert len(pillars) == 4
        for pillar in pillars:
            top = pillar.position.y + pillar.size.height / 2
            bottom = pillar.position.y - pillar.size.height / 2
            assert top == pytest.approx(90)
            assert bottom == pytest.approx(4)
        assert built.metadata.base_height == 4
        assert built.metadata.pillar_support == 4

    def test_back_panel_only_when_tall(self, wide_spec, spec_a):
        assert build(wide_spec, "Floor Stand").find("BackPanel") is not None
        assert build(spec_a, "Floor Stand").find("BackPanel") is None

    def test_shelves_leave_headroom(self, wide_spec):
        built = build(wide_spec, "Floor Stand", 2)
        # (90 - 4) / 3 spacing
        spacing = 86 / 3
        assert built.find("FloorShelf_1").position.y == pytest.approx(4 + spacing)
        assert built.find("FloorShelf_2").position.y == pytest.approx(4 + 2 * spacing)
        assert built.find("FloorShelf_1").size.width == 42

    def test_supports_for_large_shelves(self, wide_spec, spec_a):
        built = build(wide_spec, "Floor Stand", 2)
        supports = built.nodes_of_part(PartType.SUPPORT)
        assert len(supports) == 4
        assert {s.position.x for s in supports} == {-11.25, 11.25}
        assert build(spec_a, "Floor Stand", 2).nodes_of_part(PartType.SUPPORT) == []

    def test_stand_shorter_than_base_framed_from_floor(self):
        spec = Spec(
            stand=StandDimensions(width=15, depth=30, height=3, shelf_thickness=2),
            product=ProductDimensions(width=13, height=1, depth=2.5),
            layout=Layout(columns=1, depth_count=12),
        )
        built = build(spec, "Floor Stand")
        pillars = built.nodes_of_part(PartType.PILLAR)
        assert len(pillars) == 4
        for pillar in pillars:
            assert pillar.size.height == pytest.approx(3)
            assert pillar.position.y == pytest.approx(1.5)
        shelf = built.find("FloorShelf_1")
        assert 0 < shelf.position.y < 3
        for node in built.iter_nodes():
            if node.size is not None:
                assert node.size.height > 0

    def test_products_inset_from_pillars(self, wide_spec):
        built = build(wide_spec, "Floor Stand")
        first = built.find("FloorProduct_R1C1_Shelf1")
        # 50/2 - 8/2 - 3/2
        assert first.position.z == pytest.approx(19.5)
        assert built.find("FloorProduct_R3C1_Shelf1").position.x == pytest.approx(12)


class TestWallMount:

    def test_no_base_and_back_plate(self, spec_a):
        built = build(spec_a, "Wall Mount Stand", 2)
        assert built.nodes_of_part(PartType.BASE) == []
        plate = built.find("WallBackPlate")
        assert plate.size.height == 30
        assert plate.position.z == pytest.approx(-15.5)

    def test_brackets(self, spec_a):
        built = build(spec_a, "Wall Mount Stand")
        brackets = built.nodes_of_part(PartType.BRACKET)
        assert len(brackets) == 4
        assert all(b.kind == NodeKind.CYLINDER for b in brackets)
        assert brackets[0].radius == pytest.approx(15 / 16)
        assert brackets[0].rotation.x == pytest.approx(math.pi / 2)
        assert built.metadata.mounting_points == 4

    def test_cantilevered_shelves_with_arms(self, spec_a):
        built = build(spec_a, "Wall Mount Stand", 3)
        shelves = built.nodes_of_part(PartType.SHELF)
        assert len(shelves) == 3
        assert shelves[0].size.width == pytest.approx(13.5)
        assert shelves[0].position.y == pytest.approx(7.5)
        assert len(built.nodes_of_part(PartType.ARM)) == 6


class TestCornerAndRotating:

    def test_corner_is_rotated_tabletop(self, spec_a):
        tabletop = build(spec_a, "Tabletop Stand", 2)
        corner = build(spec_a, "Corner Stand", 2)
        assert corner.root.name == "CornerStand"
        assert corner.root.rotation.y == pytest.approx(math.pi / 4)
        assert corner.root.children == tabletop.root.children

    def test_rotating_adds_turntable(self, spec_a):
        tabletop = build(spec_a, "Tabletop Stand")
        rotating = build(spec_a, "Rotating Stand")
        assert rotating.root.name == "RotatingStand"
        assert rotating.root.children[:-1] == tabletop.root.children
        turntable = rotating.find("RotationBase")
        assert turntable.kind == NodeKind.CYLINDER
        assert turntable.radius == pytest.approx(17)
        assert turntable.size.height == 2
        assert turntable.position.y == pytest.approx(-1)


class TestMultiTier:

    def test_tiers_shrink_and_stack(self, spec_a):
        built = build(spec_a, "Multi-tier Stand", 3)
        tiers = built.nodes_of_part(PartType.TIER)
        assert [t.name for t in tiers] == ["Tier_1_Base", "Tier_2_Base", "Tier_3_Base"]
        assert [t.size.width for t in tiers] == pytest.approx([15, 12.75, 10.5])
        assert [t.position.y for t in tiers] == pytest.approx([1, 11, 21])
        assert built.nodes_of_part(PartType.SHELF) == []

    def test_products_on_tier_surface(self, spec_a):
        built = build(spec_a, "Multi-tier Stand", 3)
        product = built.find("TierProduct_R1C1_Tier2")
        # tier y 10 + thickness 2 + half product 2.5
        assert product.position.y == pytest.approx(14.5)
        assert product.position.z == pytest.approx(25.5 / 2 - 1.25)
        assert built.find("TierProduct_R1C11_Tier2") is None

    def test_many_tiers_stay_positive(self, spec_a):
        built = build(spec_a, "Multi-tier Stand", 9)
        for tier in built.nodes_of_part(PartType.TIER):
            assert tier.size.width > 0
            assert tier.size.depth >= spec_a.product.depth
