"""Stand generation service used by the API layer."""

from __future__ import annotations
import logging
from typing import Any
from pydantic import BaseModel

from standgen import config
from standgen.models import (
    Spec, Contract, BuiltStand, StandFormData, StandTypeInfo, GenerationConfig,
)
from standgen.core.generator import StandGenerator
from standgen.core.registry import BuilderRegistry, create_default_registry
from standgen.core.spec_generator import generate_spec_from_form_data
from standgen.core.contract import generate_contract, validate_built_geometry
from standgen.core.dimensions import add_standard_dimensions
from standgen.core.validation import ValidationResult, validate_with_report

logger = logging.getLogger(__name__)


class StandGeneration(BaseModel):
    """Everything one generation request produces."""
    spec: Spec
    contract: Contract
    stand: BuiltStand
    report: ValidationResult
    contract_ok: bool


class StandService:
    """Resolves form input, builds the stand and certifies it against its spec."""

    def __init__(self, registry: BuilderRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.generator = StandGenerator(self.registry)

    def generate(
        self,
        form_data: StandFormData | dict[str, Any] | None,
        generation: GenerationConfig | None = None,
    ) -> StandGeneration:
        if generation is None:
            generation = GenerationConfig(seed=config.SURFACE_SEED)

        spec = generate_spec_from_form_data(form_data, generation.defaults)
        report = validate_with_report(spec)
        if not report.is_valid:
            logger.warning("Spec failed hard validation: %s", "; ".join(report.errors))

        contract = generate_contract(spec)
        stand = self.generator.build(spec, form_data, seed=generation.seed)
        if generation.include_dimensions:
            stand = add_standard_dimensions(stand, spec)

        return StandGeneration(
            spec=spec,
            contract=contract,
            stand=stand,
            report=report,
            contract_ok=validate_built_geometry(stand, spec),
        )

    def list_stand_types(self) -> list[StandTypeInfo]:
        return self.registry.describe()
