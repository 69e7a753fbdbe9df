"""Hard spec validation gates that stop impossible geometry early."""

from __future__ import annotations
import logging
from pydantic import BaseModel

from standgen.models import Spec
from standgen.models.spec import DEPTH_TOLERANCE

logger = logging.getLogger(__name__)

# Below this share of the stand depth the shelf looks empty
UNDERUSE_RATIO = 0.3
TIGHT_WIDTH_CLEARANCE = 1.0   # cm
MIN_SHELF_THICKNESS = 1.5     # cm


class Measurements(BaseModel):
    calculated_depth: float
    available_depth: float
    depth_difference: float
    total_products: int


class ValidationResult(BaseModel):
    is_valid: bool
    errors: list[str] = []
    warnings: list[str] = []
    measurements: Measurements


class SpecValidationError(ValueError):
    """Raised when a spec cannot be built as requested."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        message = "VALIDATION FAILED:\n" + "\n".join(f"- {e}" for e in errors)
        super().__init__(message)


def measure(spec: Spec) -> Measurements:
    used = spec.used_depth
    return Measurements(
        calculated_depth=used,
        available_depth=spec.stand.depth,
        depth_difference=abs(used - spec.stand.depth),
        total_products=spec.layout.columns * spec.layout.depth_count,
    )


def _check(spec: Spec) -> tuple[list[str], list[str], Measurements]:
    errors: list[str] = []
    warnings: list[str] = []
    measurements = measure(spec)
    stand, product, layout = spec.stand, spec.product, spec.layout
    used = measurements.calculated_depth

    if used > stand.depth + DEPTH_TOLERANCE:
        errors.append(
            f"DEPTH OVERFLOW: products need {used:g}cm but the stand only has "
            f"{stand.depth:g}cm. Reduce product count or depth, or deepen the stand."
        )
    if used < stand.depth * UNDERUSE_RATIO:
        warnings.append(
            f"DEPTH UNDERUTILIZATION: products use {used:g}cm of {stand.depth:g}cm "
            f"({round(used / stand.depth * 100)}%)."
        )

    if layout.columns < 1:
        errors.append(f"LAYOUT ERROR: need at least 1 column, got {layout.columns}.")
    if layout.depth_count < 1:
        errors.append(f"COUNT ERROR: need at least 1 product deep, got {layout.depth_count}.")
    if layout.gaps_depth < 0:
        errors.append(f"GAPS ERROR: gaps cannot be negative, got {layout.gaps_depth:g}cm.")

    width_needed = layout.columns * product.width
    if width_needed > stand.width + DEPTH_TOLERANCE:
        errors.append(
            f"WIDTH OVERFLOW: {layout.columns} columns x {product.width:g}cm = "
            f"{width_needed:g}cm needed, but the stand is {stand.width:g}cm wide."
        )

    headroom = stand.height - stand.shelf_thickness
    if product.height > headroom:
        errors.append(
            f"HEIGHT OVERFLOW: product {product.height:g}cm is taller than the "
            f"available {headroom:g}cm."
        )

    clearance = stand.width - product.width
    if 0 <= clearance < TIGHT_WIDTH_CLEARANCE:
        warnings.append(f"Tight width fit: only {clearance:g}cm clearance.")

    if stand.shelf_thickness < MIN_SHELF_THICKNESS:
        warnings.append(
            f"Thin shelf: {stand.shelf_thickness:g}cm may be structurally weak."
        )

    return errors, warnings, measurements


def validate_spec(spec: Spec) -> ValidationResult:
    """Validate a spec, raising SpecValidationError on any hard error."""
    errors, warnings, measurements = _check(spec)
    if errors:
        raise SpecValidationError(errors)
    for warning in warnings:
        logger.debug("Spec warning: %s", warning)
    return ValidationResult(
        is_valid=True, errors=[], warnings=warnings, measurements=measurements,
    )


def validate_with_report(spec: Spec) -> ValidationResult:
    """Non-raising variant: errors are returned in the report."""
    errors, warnings, measurements = _check(spec)
    return ValidationResult(
        is_valid=not errors,
        errors=errors,
        warnings=warnings,
        measurements=measurements,
    )
