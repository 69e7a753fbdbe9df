"""Maps loose form input onto a complete, canonical spec."""

from __future__ import annotations
import logging
from typing import Any

from standgen.models import (
    Spec, StandDimensions, ProductDimensions, Layout, SpecMetadata,
    StandFormData, SpecDefaults, StandType, DEFAULTS,
)

logger = logging.getLogger(__name__)


class ResolvedForm(StandFormData):
    """Form data with every field populated."""
    stand_width: float
    stand_depth: float
    stand_height: float
    shelf_count: int
    product_width: float
    product_height: float
    product_depth: float
    front_face_count: int
    back_to_back_count: int
    gaps_depth: float
    stand_type: str


def resolve_form_data(
    raw: StandFormData | dict[str, Any] | None,
    defaults: SpecDefaults = DEFAULTS,
) -> ResolvedForm:
    """Single defaulting step: fill every missing or unusable field."""
    form = StandFormData.from_raw(raw)
    values = form.model_dump()
    for key, value in values.items():
        if value is None:
            values[key] = getattr(defaults, key)
    return ResolvedForm(**values)


def generate_spec_from_form_data(
    raw: StandFormData | dict[str, Any] | None,
    defaults: SpecDefaults = DEFAULTS,
) -> Spec:
    """
    Build a canonical spec from partial form data. Never raises.

    Floor stands given a tabletop-scale height (<= threshold) are raised to
    the minimum floor height for their shelf count; the requested height is
    kept in `metadata.original_height`.
    """
    form = resolve_form_data(raw, defaults)

    height = form.stand_height
    if (
        StandType.parse(form.stand_type) == StandType.FLOOR
        and form.stand_height <= defaults.floor_autoscale_threshold
    ):
        height = defaults.floor_height(form.shelf_count)
        logger.info(
            "Auto-scaling floor stand height from %scm to %scm",
            form.stand_height, height,
        )

    return Spec(
        stand=StandDimensions(
            width=form.stand_width,
            depth=form.stand_depth,
            height=height,
            shelf_thickness=defaults.shelf_thickness,
        ),
        product=ProductDimensions(
            width=form.product_width,
            height=form.product_height,
            depth=form.product_depth,
        ),
        layout=Layout(
            columns=form.front_face_count,
            depth_count=form.back_to_back_count,
            gaps_depth=form.gaps_depth,
        ),
        metadata=SpecMetadata(
            stand_type=form.stand_type,
            shelf_count=form.shelf_count,
            original_height=form.stand_height,
        ),
    )
