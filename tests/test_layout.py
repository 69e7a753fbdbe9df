"""Tests for the shared grid layout math."""
import pytest

from standgen.core.layout import (
    MIN_TIER_SCALE,
    depth_capacity,
    depth_position,
    grid_slots,
    product_elevation,
    row_position,
    scaled_count,
    tier_grid,
    tier_scale,
    total_products,
)
from standgen.models import ProductDimensions


PRODUCT = ProductDimensions(width=13, height=5, depth=2.5)


class TestGridPositions:

    def test_single_row_is_centered(self):
        assert row_position(0, 1, 13) == 0

    def test_rows_centered_as_group(self):
        xs = [row_position(i, 3, 10) for i in range(3)]
        assert xs == [-10, 0, 10]

    def test_even_row_count(self):
        xs = [row_position(i, 2, 13) for i in range(2)]
        assert xs == [-6.5, 6.5]

    def test_first_product_flush_with_front(self):
        assert depth_position(0, 30, 2.5, 0) == pytest.approx(13.75)

    def test_depth_steps_include_gaps(self):
        z0 = depth_position(0, 30, 2.5, 0.8)
        z1 = depth_position(1, 30, 2.5, 0.8)
        assert z0 - z1 == pytest.approx(3.3)

    def test_front_inset(self):
        assert depth_position(0, 30, 2.5, 0, front_inset=1.5) == pytest.approx(12.25)

    def test_elevation(self):
        # Shelf center at 16, 2cm thick, 5cm product
        assert product_elevation(16, 2, 5) == pytest.approx(19.5)

    def test_spec_a_grid_spans_full_depth(self):
        slots = grid_slots(1, 12, PRODUCT, 0, surface_depth=30, surface_y=16, shelf_thickness=2)
        assert len(slots) == 12
        front = max(s.z for s in slots) + PRODUCT.depth / 2
        back = min(s.z for s in slots) - PRODUCT.depth / 2
        assert front == pytest.approx(15)
        assert back == pytest.approx(-15)

    def test_grid_is_row_major(self):
        slots = grid_slots(2, 3, PRODUCT, 0, surface_depth=30, surface_y=0, shelf_thickness=2)
        assert [(s.row, s.col) for s in slots] == [
            (0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2),
        ]
        assert len({(s.x, s.z) for s in slots}) == 6

    def test_total_products(self):
        assert total_products(3, 4, 2) == 24


class TestTierShrinkage:

    def test_scales(self):
        assert tier_scale(0) == 1.0
        assert tier_scale(1) == pytest.approx(0.85)
        assert tier_scale(2) == pytest.approx(0.70)

    def test_scale_never_collapses(self):
        assert tier_scale(7) == MIN_TIER_SCALE
        assert tier_scale(20) == MIN_TIER_SCALE

    def test_scaled_counts(self):
        assert scaled_count(12, 1.0) == 12
        assert scaled_count(12, 0.85) == 10
        assert scaled_count(12, 0.70) == 8
        assert scaled_count(1, 0.70) == 1

    def test_three_tier_default_grid(self):
        tiers = [tier_grid(t, 15, 30, 1, 12, PRODUCT, 0) for t in range(3)]
        assert [t.back_to_back_count for t in tiers] == [12, 10, 8]
        assert [t.front_face_count for t in tiers] == [1, 1, 1]
        assert sum(t.product_count for t in tiers) == 30
        assert tiers[1].depth == pytest.approx(25.5)
        assert tiers[2].width == pytest.approx(10.5)

    def test_upper_tier_count_capped_to_fit(self):
        # 4 * 0.85 floors to 3, but 3 * 9cm no longer fits in 25.5cm
        tier = tier_grid(1, 40, 30, 1, 4, ProductDimensions(width=10, height=5, depth=9), 0)
        assert tier.back_to_back_count == 2
        assert tier.back_to_back_count * 9 <= tier.depth

    def test_tiny_tier_widened_to_one_product(self):
        product = ProductDimensions(width=5, height=5, depth=9)
        tier = tier_grid(6, 20, 10, 1, 1, product, 0)
        assert tier.back_to_back_count == 1
        assert tier.depth == pytest.approx(9)

    def test_base_tier_keeps_requested_grid(self):
        tier = tier_grid(0, 15, 10, 1, 12, PRODUCT, 0)
        assert tier.back_to_back_count == 12

    def test_depth_capacity(self):
        assert depth_capacity(30, 2.5, 0) == 12
        assert depth_capacity(28.9, 2.5, 0.8) == 9
        assert depth_capacity(2, 2.5, 0) == 0
