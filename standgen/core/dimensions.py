"""Dimension annotation: measurement lines, end ticks and label anchors."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from standgen.models import (
    Point3D, Vector3D, Spec, BuiltStand, SceneNode, NodeKind, PartType,
    direction_from_points,
)
from standgen.core.contract import format_cm

TICK_HALF_LENGTH = 0.5
DEFAULT_LABEL_OFFSET = 2.0


class Segment(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: Point3D
    end: Point3D


class DimensionLine(BaseModel):
    """A measurement between two points with ticks and a label anchor."""
    model_config = ConfigDict(frozen=True)

    label: str
    start: Point3D
    end: Point3D
    midpoint: Point3D
    label_position: Point3D
    start_tick: Segment
    end_tick: Segment

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


def tick_direction(start: Point3D, end: Point3D) -> Vector3D:
    """
    Unit line direction rotated 90 degrees in the floor plane.

    A vertical line has no horizontal direction; its ticks lie along X.
    """
    perpendicular = direction_from_points(start, end).normalized().horizontal_perpendicular()
    if perpendicular.length() < 1e-10:
        return Vector3D(x=1.0, y=0.0, z=0.0)
    return perpendicular.normalized()


def _tick(at: Point3D, direction: Vector3D) -> Segment:
    half = direction * TICK_HALF_LENGTH
    return Segment(start=at + half, end=at - half)


def create_dimension_line(
    start: Point3D,
    end: Point3D,
    label: str,
    offset: float = DEFAULT_LABEL_OFFSET,
) -> DimensionLine:
    direction = tick_direction(start, end)
    midpoint = start.midpoint(end)
    return DimensionLine(
        label=label,
        start=start,
        end=end,
        midpoint=midpoint,
        label_position=midpoint.offset(dy=offset),
        start_tick=_tick(start, direction),
        end_tick=_tick(end, direction),
    )


def standard_dimensions(spec: Spec) -> list[DimensionLine]:
    """Width (front, above), depth (right side) and height (left side) lines."""
    w, d, h = spec.stand.width, spec.stand.depth, spec.stand.height
    return [
        create_dimension_line(
            Point3D(x=-w / 2, y=h + 3, z=d / 2 + 1),
            Point3D(x=w / 2, y=h + 3, z=d / 2 + 1),
            f"{format_cm(w)} cm",
        ),
        create_dimension_line(
            Point3D(x=w / 2 + 3, y=h + 1, z=-d / 2),
            Point3D(x=w / 2 + 3, y=h + 1, z=d / 2),
            f"{format_cm(d)} cm",
        ),
        create_dimension_line(
            Point3D(x=-w / 2 - 3, y=0, z=-d / 2 - 1),
            Point3D(x=-w / 2 - 3, y=h, z=-d / 2 - 1),
            f"{format_cm(h)} cm",
        ),
    ]


def dimension_node(line: DimensionLine) -> SceneNode:
    return SceneNode(
        name=f"Dimension_{line.label}",
        kind=NodeKind.LINE,
        part=PartType.DIMENSION,
        points=[line.start, line.end],
        children=[
            SceneNode(
                name=f"Dimension_{line.label}_StartTick",
                kind=NodeKind.LINE,
                part=PartType.DIMENSION,
                points=[line.start_tick.start, line.start_tick.end],
            ),
            SceneNode(
                name=f"Dimension_{line.label}_EndTick",
                kind=NodeKind.LINE,
                part=PartType.DIMENSION,
                points=[line.end_tick.start, line.end_tick.end],
            ),
        ],
        metadata={
            "label_text": line.label,
            "label_position": line.label_position.as_tuple(),
        },
    )


def add_standard_dimensions(built: BuiltStand, spec: Spec) -> BuiltStand:
    """Copy of `built` with a Dimensions group appended to its root."""
    group = SceneNode(
        name="Dimensions",
        part=PartType.DIMENSION,
        children=[dimension_node(line) for line in standard_dimensions(spec)],
    )
    return built.model_copy(update={"root": built.root.with_children(group)})
