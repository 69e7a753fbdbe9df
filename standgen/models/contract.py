"""The geometry contract handed to downstream consumers."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

CAMERA_DIRECTIVE = "orthographic 3/4"

# Mutations a downstream consumer must never apply to the arrangement
FORBIDDEN_MUTATIONS: tuple[str, ...] = (
    "change_dimensions",
    "extra_rows",
    "stagger",
    "count_drift",
    "rotate_products",
    "add_products",
    "remove_products",
    "change_layout",
)


class ContractStand(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float
    depth: float
    height: float
    shelf_thickness: float


class ContractProduct(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float
    height: float
    depth: float


class Arrangement(BaseModel):
    model_config = ConfigDict(frozen=True)

    columns_across: int
    depth_count: int
    gaps_depth_cm: float


class Checksum(BaseModel):
    """Per-shelf self-consistency proof (not multiplied by shelf count)."""
    model_config = ConfigDict(frozen=True)

    total_products: int
    used_depth_cm: float
    verification: str


class Contract(BaseModel):
    """Immutable, checksummed description of what must not change."""
    model_config = ConfigDict(frozen=True)

    stand_cm: ContractStand
    product_cm: ContractProduct
    arrangement: Arrangement
    camera: str = CAMERA_DIRECTIVE
    forbid: list[str] = list(FORBIDDEN_MUTATIONS)
    checksum: Checksum
