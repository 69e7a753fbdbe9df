"""Everything one builder call needs."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .materials import MaterialRole, SurfaceMaterial
from .stand import StandSpec


class BuildContext(BaseModel):
    """
    Holds the inputs for a single stand build.

    The factory resolves the stand spec and the shared materials once;
    builders read from here and never reach back into form data.
    """
    model_config = ConfigDict(frozen=True)

    stand_spec: StandSpec
    materials: dict[MaterialRole, SurfaceMaterial]

    def material_list(self) -> list[SurfaceMaterial]:
        return [self.materials[role] for role in MaterialRole]
