"""Tests for dimension lines and the dimension overlay."""
import pytest

from standgen.core.dimensions import (
    TICK_HALF_LENGTH,
    add_standard_dimensions,
    create_dimension_line,
    standard_dimensions,
    tick_direction,
)
from standgen.models import NodeKind, PartType, Point3D


class TestDimensionLine:

    def test_horizontal_line(self):
        line = create_dimension_line(Point3D(x=-7.5, y=33, z=16), Point3D(x=7.5, y=33, z=16), "15 cm")
        assert line.length == pytest.approx(15)
        assert line.midpoint.as_tuple() == (0, 33, 16)
        assert line.label_position.as_tuple() == (0, 35, 16)

    def test_ticks_are_perpendicular_in_floor_plane(self):
        line = create_dimension_line(Point3D(x=0, y=0, z=0), Point3D(x=10, y=0, z=0), "10 cm")
        tick = line.start_tick
        assert tick.start.as_tuple() == pytest.approx((0, 0, TICK_HALF_LENGTH))
        assert tick.end.as_tuple() == pytest.approx((0, 0, -TICK_HALF_LENGTH))
        assert line.end_tick.start.x == pytest.approx(10)

    def test_vertical_line_ticks_fall_back_to_x(self):
        direction = tick_direction(Point3D(x=1, y=0, z=0), Point3D(x=1, y=30, z=0))
        assert (direction.x, direction.y, direction.z) == (1, 0, 0)
        line = create_dimension_line(Point3D(x=1, y=0, z=0), Point3D(x=1, y=30, z=0), "30 cm")
        assert line.start_tick.start.distance_to(line.start_tick.end) == pytest.approx(1.0)

    def test_custom_offset(self):
        line = create_dimension_line(Point3D(), Point3D(x=4), "4 cm", offset=5)
        assert line.label_position.y == pytest.approx(5)


class TestStandardDimensions:

    def test_labels(self, spec_a):
        assert [line.label for line in standard_dimensions(spec_a)] == ["15 cm", "30 cm", "30 cm"]

    def test_fractional_label(self, wide_spec):
        spec = wide_spec.model_copy(update={
            "stand": wide_spec.stand.model_copy(update={"width": 42.5}),
        })
        assert standard_dimensions(spec)[0].label == "42.5 cm"

    def test_lines_measure_the_stand(self, spec_a):
        width, depth, height = standard_dimensions(spec_a)
        assert width.length == pytest.approx(15)
        assert depth.length == pytest.approx(30)
        assert height.length == pytest.approx(30)
        assert width.start.y == pytest.approx(33)
        assert height.start.x == pytest.approx(-10.5)

    def test_overlay_appended(self, built_tabletop, spec_a):
        annotated = add_standard_dimensions(built_tabletop, spec_a)
        group = annotated.find("Dimensions")
        assert group.kind == NodeKind.GROUP
        assert len(group.children) == 3
        line = group.children[0]
        assert line.kind == NodeKind.LINE
        assert line.part == PartType.DIMENSION
        assert len(line.children) == 2
        assert line.metadata["label_text"] == "15 cm"

    def test_overlay_does_not_change_counts(self, built_tabletop, spec_a):
        annotated = add_standard_dimensions(built_tabletop, spec_a)
        assert annotated.stats == built_tabletop.stats
        assert built_tabletop.find("Dimensions") is None
