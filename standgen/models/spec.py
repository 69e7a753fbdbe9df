"""Dimensional spec: the canonical stand, product and layout configuration.

All measurements are centimeters.
"""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field

# Float slack for "fits exactly" comparisons (a fully packed shelf must pass)
DEPTH_TOLERANCE = 1e-9


class StandDimensions(BaseModel):
    """Outer stand block."""
    model_config = ConfigDict(frozen=True)

    width: float = Field(gt=0)            # W
    depth: float = Field(gt=0)            # D
    height: float = Field(gt=0)           # H
    shelf_thickness: float = Field(gt=0)


class ProductDimensions(BaseModel):
    """A single product package."""
    model_config = ConfigDict(frozen=True)

    width: float = Field(gt=0)
    height: float = Field(gt=0)
    depth: float = Field(gt=0)


class Layout(BaseModel):
    """Per-shelf product grid."""
    model_config = ConfigDict(frozen=True)

    columns: int = Field(ge=1)            # Front-facing count
    depth_count: int = Field(ge=1)        # Back-to-back count per shelf
    gaps_depth: float = Field(default=0.0, ge=0)  # Gap between depth-wise products

    @property
    def products_per_shelf(self) -> int:
        return self.columns * self.depth_count


class SpecMetadata(BaseModel):
    """Optional generation context carried along with a spec."""
    model_config = ConfigDict(frozen=True)

    stand_type: str | None = None
    shelf_count: int | None = None
    original_height: float | None = None


class Spec(BaseModel):
    """
    Canonical, immutable stand configuration.

    Construction only checks field ranges. Whether the depth-wise product
    run fits the footprint is reported by `fits_footprint` and enforced by
    `standgen.core.validation`.
    """
    model_config = ConfigDict(frozen=True)

    stand: StandDimensions
    product: ProductDimensions
    layout: Layout
    metadata: SpecMetadata | None = None

    @property
    def used_depth(self) -> float:
        """Depth consumed by one depth-wise run of products, gaps included."""
        n = self.layout.depth_count
        return n * self.product.depth + (n - 1) * self.layout.gaps_depth

    @property
    def fits_footprint(self) -> bool:
        return self.used_depth <= self.stand.depth + DEPTH_TOLERANCE

    @property
    def products_per_shelf(self) -> int:
        return self.layout.products_per_shelf


# Wafer tabletop stand: 1x12 single-file queue, zero gaps, fully packed
SPEC_A = Spec(
    stand=StandDimensions(width=15, depth=30, height=30, shelf_thickness=2),
    product=ProductDimensions(width=13, height=5, depth=2.5),
    layout=Layout(columns=1, depth_count=12, gaps_depth=0),
)

# Same stand, 1x9 queue with 0.8cm gaps
SPEC_B = Spec(
    stand=StandDimensions(width=15, depth=30, height=30, shelf_thickness=2),
    product=ProductDimensions(width=13, height=5, depth=2.5),
    layout=Layout(columns=1, depth_count=9, gaps_depth=0.8),
)
