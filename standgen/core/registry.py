"""Builder registry: one builder per stand archetype."""

from __future__ import annotations

from standgen.builders.base import StandBuilder
from standgen.models import StandType, StandTypeInfo


class BuilderRegistry:
    """
    Central registry for stand builders.

    Builders are registered at startup, keyed by their archetype. The
    factory resolves the archetype first and then asks the registry for
    the matching builder.
    """

    def __init__(self) -> None:
        self._builders: dict[StandType, StandBuilder] = {}

    def register(self, builder: StandBuilder) -> None:
        """Register a builder, replacing any existing one for its archetype."""
        self._builders[builder.stand_type] = builder

    def unregister(self, stand_type: StandType) -> None:
        self._builders.pop(stand_type, None)

    def get_builder(self, stand_type: StandType) -> StandBuilder | None:
        return self._builders.get(stand_type)

    def list_builders(self) -> list[StandBuilder]:
        """Return registered builders in archetype declaration order."""
        return [self._builders[t] for t in StandType if t in self._builders]

    def missing(self) -> list[StandType]:
        """Archetypes with no registered builder."""
        return [t for t in StandType if t not in self._builders]

    def describe(self) -> list[StandTypeInfo]:
        return [
            StandTypeInfo(
                stand_type=b.stand_type,
                builder_id=b.get_id(),
                builder_name=b.get_name(),
            )
            for b in self.list_builders()
        ]


def create_default_registry() -> BuilderRegistry:
    """Create a registry with a builder for every archetype."""
    from standgen.builders.tabletop import TabletopStandBuilder
    from standgen.builders.floor import FloorStandBuilder
    from standgen.builders.wall_mount import WallMountStandBuilder
    from standgen.builders.corner import CornerStandBuilder
    from standgen.builders.rotating import RotatingStandBuilder
    from standgen.builders.multi_tier import MultiTierStandBuilder

    tabletop = TabletopStandBuilder()
    registry = BuilderRegistry()
    registry.register(tabletop)
    registry.register(FloorStandBuilder())
    registry.register(WallMountStandBuilder())
    registry.register(CornerStandBuilder(tabletop))
    registry.register(RotatingStandBuilder(tabletop))
    registry.register(MultiTierStandBuilder())

    missing = registry.missing()
    if missing:
        raise ValueError(
            "No builder registered for: " + ", ".join(t.value for t in missing)
        )
    return registry
