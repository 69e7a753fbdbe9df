"""The tabletop stand turned 45 degrees to sit in a corner."""

from __future__ import annotations
import math

from standgen.builders.base import StandBuilder
from standgen.builders.tabletop import TabletopStandBuilder
from standgen.models import BuildContext, BuiltStand, Point3D, StandType

CORNER_ANGLE = math.pi / 4


class CornerStandBuilder(StandBuilder):

    stand_type = StandType.CORNER

    def __init__(self, tabletop: TabletopStandBuilder | None = None) -> None:
        self.tabletop = tabletop or TabletopStandBuilder()

    def get_id(self) -> str:
        return "stand.corner"

    def get_name(self) -> str:
        return "Corner Stand Builder"

    def build(self, context: BuildContext) -> BuiltStand:
        built = self.tabletop.build(context)
        root = built.root.model_copy(update={
            "name": "CornerStand",
            "rotation": Point3D(y=CORNER_ANGLE),
        })
        return built.model_copy(update={"root": root})
