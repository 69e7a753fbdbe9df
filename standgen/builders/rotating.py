"""The tabletop stand on a cylindrical turntable."""

from __future__ import annotations

from standgen.builders.base import StandBuilder, cylinder
from standgen.builders.tabletop import TabletopStandBuilder
from standgen.models import (
    BuildContext, BuiltStand, MaterialRole, PartType, StandType,
)

TURNTABLE_MARGIN = 2.0
TURNTABLE_HEIGHT = 2.0


class RotatingStandBuilder(StandBuilder):

    stand_type = StandType.ROTATING

    def __init__(self, tabletop: TabletopStandBuilder | None = None) -> None:
        self.tabletop = tabletop or TabletopStandBuilder()

    def get_id(self) -> str:
        return "stand.rotating"

    def get_name(self) -> str:
        return "Rotating Stand Builder"

    def build(self, context: BuildContext) -> BuiltStand:
        built = self.tabletop.build(context)
        stand = context.stand_spec.stand

        # Sits directly under the base, sized to the larger footprint side
        turntable = cylinder(
            "RotationBase", PartType.TURNTABLE, MaterialRole.STRUCTURE,
            radius=max(stand.width, stand.depth) / 2 + TURNTABLE_MARGIN,
            height=TURNTABLE_HEIGHT,
            y=-TURNTABLE_HEIGHT / 2,
        )
        root = built.root.with_children(turntable).model_copy(
            update={"name": "RotatingStand"},
        )
        return built.model_copy(update={"root": root})
