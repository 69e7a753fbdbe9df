"""Contract generation and built-geometry drift checks."""

from __future__ import annotations
import logging
from typing import Any

from standgen.models import (
    Spec, BuiltStand, StandFormData, Contract, ContractStand, ContractProduct,
    Arrangement, Checksum, FORBIDDEN_MUTATIONS, CAMERA_DIRECTIVE,
)
from standgen.core.spec_generator import generate_spec_from_form_data

logger = logging.getLogger(__name__)


def format_cm(value: float) -> str:
    """Shortest human form of a measurement: 15.0 -> '15', 0.8 -> '0.8'."""
    return f"{value:g}"


def verification_string(columns: int, depth_count: int, gaps_depth: float) -> str:
    gap = "zero" if gaps_depth == 0 else format_cm(gaps_depth)
    return f"{columns}x{depth_count}_{gap}_gaps"


def generate_contract(spec: Spec) -> Contract:
    """Derive the contract for a spec. The checksum is recomputed every call."""
    layout = spec.layout
    return Contract(
        stand_cm=ContractStand(
            width=spec.stand.width,
            depth=spec.stand.depth,
            height=spec.stand.height,
            shelf_thickness=spec.stand.shelf_thickness,
        ),
        product_cm=ContractProduct(
            width=spec.product.width,
            height=spec.product.height,
            depth=spec.product.depth,
        ),
        arrangement=Arrangement(
            columns_across=layout.columns,
            depth_count=layout.depth_count,
            gaps_depth_cm=layout.gaps_depth,
        ),
        camera=CAMERA_DIRECTIVE,
        forbid=list(FORBIDDEN_MUTATIONS),
        checksum=Checksum(
            total_products=layout.columns * layout.depth_count,
            used_depth_cm=(
                layout.depth_count * spec.product.depth
                + (layout.depth_count - 1) * layout.gaps_depth
            ),
            verification=verification_string(
                layout.columns, layout.depth_count, layout.gaps_depth,
            ),
        ),
    )


def generate_contract_from_form_data(
    form_data: StandFormData | dict[str, Any] | None,
) -> Contract:
    return generate_contract(generate_spec_from_form_data(form_data))


def contract_drift(built: BuiltStand | None, spec: Spec) -> list[str]:
    """Return the field paths where the built stand differs from `spec`."""
    if built is None or built.metadata is None:
        return ["metadata"]

    built_spec = built.metadata.spec
    checks = [
        ("stand.width", built_spec.stand.width, spec.stand.width),
        ("stand.depth", built_spec.stand.depth, spec.stand.depth),
        ("stand.height", built_spec.stand.height, spec.stand.height),
        ("layout.depth_count", built_spec.layout.depth_count, spec.layout.depth_count),
        ("layout.columns", built_spec.layout.columns, spec.layout.columns),
        ("layout.gaps_depth", built_spec.layout.gaps_depth, spec.layout.gaps_depth),
    ]
    return [path for path, built_value, expected in checks if built_value != expected]


def validate_built_geometry(built: BuiltStand | None, spec: Spec) -> bool:
    """
    True only if the built stand echoes the same dimensions and arrangement.

    A coarse, deterministic drift gate: it compares the stand block and the
    grid counts, not individual product placements. A False result means
    the geometry drifted and should be rejected and regenerated.
    """
    drift = contract_drift(built, spec)
    if drift:
        logger.warning("Built geometry drifted from spec: %s", ", ".join(drift))
        return False
    return True


def render_constraint_text(contract: Contract) -> str:
    """Plain-text block describing the geometry a downstream stage must keep."""
    stand = contract.stand_cm
    product = contract.product_cm
    arrangement = contract.arrangement
    checksum = contract.checksum

    if arrangement.gaps_depth_cm == 0:
        spacing = "Same spacing (no gaps) between packages"
    else:
        spacing = f"Same {format_cm(arrangement.gaps_depth_cm)}cm gap between packages"

    lines = [
        "GEOMETRY TO PRESERVE (DO NOT CHANGE):",
        f"- Exact stand dimensions: {format_cm(stand.width)}x{format_cm(stand.depth)}"
        f"x{format_cm(stand.height)} cm",
        f"- Exact shelf thickness: {format_cm(stand.shelf_thickness)} cm",
        f"- Exact product dimensions: {format_cm(product.width)}x"
        f"{format_cm(product.height)}x{format_cm(product.depth)} cm",
        f"- All {checksum.total_products} packages per shelf in a "
        f"{arrangement.columns_across}x{arrangement.depth_count} straight grid",
        f"- {spacing}",
        f"- Camera: {contract.camera}",
        f"- Forbidden: {', '.join(contract.forbid)}",
        f"- Verification: {checksum.verification} "
        f"(used depth {format_cm(checksum.used_depth_cm)} cm)",
    ]
    return "\n".join(lines)
