"""Stand archetypes and the per-build stand spec."""

from __future__ import annotations
from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict, Field

from .spec import Spec


class StandType(str, Enum):
    TABLETOP = "Tabletop Stand"
    FLOOR = "Floor Stand"
    WALL_MOUNT = "Wall Mount Stand"
    CORNER = "Corner Stand"
    ROTATING = "Rotating Stand"
    MULTI_TIER = "Multi-tier Stand"

    @classmethod
    def parse(cls, label: str | None) -> StandType | None:
        """
        Resolve a form label to an archetype, or None if unknown.

        Accepts the exact tag ("Floor Stand") or a localized label that
        carries the tag in trailing parentheses ("Ayaklı Stant (Floor Stand)").
        """
        if not label:
            return None
        text = str(label).strip()
        for member in cls:
            if text == member.value:
                return member
        if text.endswith(")") and "(" in text:
            inner = text[text.rindex("(") + 1:-1].strip()
            for member in cls:
                if inner == member.value:
                    return member
        return None


class StandSpec(Spec):
    """
    A spec bound to one archetype for exactly one builder call.

    `stand_type` is the resolved archetype that picks the builder;
    `stand_type_label` is the caller's tag, echoed untouched in metadata.
    """
    model_config = ConfigDict(frozen=True)

    stand_type: StandType = StandType.TABLETOP
    stand_type_label: str = StandType.TABLETOP.value
    shelf_count: int = Field(default=1, ge=1)
    form_data: dict[str, Any] = {}

    def base_spec(self) -> Spec:
        """The plain spec this stand spec was derived from."""
        return Spec(
            stand=self.stand,
            product=self.product,
            layout=self.layout,
            metadata=self.metadata,
        )


class StandTypeInfo(BaseModel):
    """Archetype summary for listings."""
    stand_type: StandType
    builder_id: str
    builder_name: str
