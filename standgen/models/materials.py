"""Logical surface roles and their physical material parameters."""

from __future__ import annotations
from enum import Enum
import numpy as np
from pydantic import BaseModel, ConfigDict, Field
from pydantic.json_schema import SkipJsonSchema


class MaterialRole(str, Enum):
    STRUCTURE = "structure"
    SHELF = "shelf"
    PRODUCT = "product"


class SurfaceMapKind(str, Enum):
    NORMAL = "normal"
    ROUGHNESS = "roughness"


class SurfaceMap(BaseModel):
    """Procedural per-texel detail data. The raw texels are not serialised."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: SurfaceMapKind
    width: int
    height: int
    channels: int
    seed: int | None = None
    data: SkipJsonSchema[np.ndarray | None] = Field(default=None, exclude=True, repr=False)


class SurfaceMaterial(BaseModel):
    """PBR-style parameters for one surface role."""
    model_config = ConfigDict(frozen=True)

    name: str
    role: MaterialRole
    color: str                          # Base color intent, "#rrggbb"
    roughness: float
    metalness: float
    clearcoat: float
    clearcoat_roughness: float
    reflectivity: float
    normal_map: SurfaceMap | None = None
    normal_scale: float = 0.0
    roughness_map: SurfaceMap | None = None
