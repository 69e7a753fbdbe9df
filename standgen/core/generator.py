"""Stand factory. Resolves the archetype and runs exactly one builder."""

from __future__ import annotations
import logging
from typing import Any

from standgen.models import (
    Spec, StandSpec, StandType, StandFormData, BuildContext, BuiltStand, DEFAULTS,
)
from standgen.core.registry import BuilderRegistry, create_default_registry
from standgen.core.materials import create_stand_materials

logger = logging.getLogger(__name__)


def _raw_form(form_data: StandFormData | dict[str, Any] | None) -> dict[str, Any]:
    if form_data is None:
        return {}
    if isinstance(form_data, StandFormData):
        return form_data.model_dump(by_alias=True, exclude_none=True)
    return dict(form_data)


class StandGenerator:
    """
    Stateless stand factory.

    Takes a spec + form data, binds them into a StandSpec, picks the
    builder for the archetype and returns its BuiltStand.
    """

    def __init__(self, registry: BuilderRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()

    def resolve_stand_spec(
        self,
        spec: Spec,
        form_data: StandFormData | dict[str, Any] | None = None,
    ) -> StandSpec:
        form = StandFormData.from_raw(form_data)
        meta = spec.metadata

        label = form.stand_type or (meta.stand_type if meta else None) or DEFAULTS.stand_type
        shelf_count = form.shelf_count or (meta.shelf_count if meta else None) or DEFAULTS.shelf_count

        stand_type = StandType.parse(label)
        if stand_type is None:
            logger.warning("Unknown stand type: %s, falling back to Tabletop", label)
            stand_type = StandType.TABLETOP

        return StandSpec(
            stand=spec.stand,
            product=spec.product,
            layout=spec.layout,
            metadata=spec.metadata,
            stand_type=stand_type,
            stand_type_label=label,
            shelf_count=shelf_count,
            form_data=_raw_form(form_data),
        )

    def build(
        self,
        spec: Spec,
        form_data: StandFormData | dict[str, Any] | None = None,
        seed: int | None = None,
    ) -> BuiltStand:
        stand_spec = self.resolve_stand_spec(spec, form_data)

        builder = self.registry.get_builder(stand_spec.stand_type)
        if builder is None:
            raise ValueError(f"No builder registered for {stand_spec.stand_type.value}")

        logger.info(
            "Building %s with %d shelf(s)",
            stand_spec.stand_type_label, stand_spec.shelf_count,
        )
        context = BuildContext(
            stand_spec=stand_spec,
            materials=create_stand_materials(seed),
        )
        return builder.build(context)


_default_generator: StandGenerator | None = None


def default_generator() -> StandGenerator:
    global _default_generator
    if _default_generator is None:
        _default_generator = StandGenerator()
    return _default_generator


def build_stand_group(
    spec: Spec,
    form_data: StandFormData | dict[str, Any] | None = None,
    *,
    seed: int | None = None,
) -> BuiltStand:
    """Build the stand for `spec`; standType and shelfCount come from form data."""
    return default_generator().build(spec, form_data, seed)
