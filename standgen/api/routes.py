"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from standgen import config
from standgen.models import Spec, StandFormData, GenerationConfig
from standgen.services.stand_service import StandService
from standgen.core.spec_generator import generate_spec_from_form_data
from standgen.core.contract import generate_contract, render_constraint_text
from standgen.core.validation import ValidationResult, validate_spec, validate_with_report
from standgen.api.schemas import (
    GenerateRequest, GenerateResponse, ContractResponse, StandTypesResponse,
)

router = APIRouter()

# Shared service instance
_service = StandService()


@router.post("/generate", response_model=GenerateResponse)
async def generate_stand(request: GenerateRequest) -> GenerateResponse:
    """Resolve the form, build the stand and certify it against its contract."""
    seed = request.seed if request.seed is not None else config.SURFACE_SEED
    result = _service.generate(
        request.form,
        GenerationConfig(seed=seed, include_dimensions=request.include_dimensions),
    )
    return GenerateResponse(**dict(result))


@router.post("/spec", response_model=Spec)
async def resolve_spec(form: StandFormData) -> Spec:
    """Resolve raw form data into a canonical spec."""
    return generate_spec_from_form_data(form)


@router.post("/contract", response_model=ContractResponse)
async def contract_for_form(form: StandFormData) -> ContractResponse:
    contract = generate_contract(generate_spec_from_form_data(form))
    return ContractResponse(
        contract=contract,
        constraint_text=render_constraint_text(contract),
    )


@router.post("/validate", response_model=ValidationResult)
async def validate(spec: Spec, strict: bool = False) -> ValidationResult:
    """Run the hard validation gates. Strict mode answers 422 on any error."""
    if strict:
        return validate_spec(spec)
    return validate_with_report(spec)


@router.get("/stand-types", response_model=StandTypesResponse)
async def list_stand_types() -> StandTypesResponse:
    """List all supported stand archetypes."""
    return StandTypesResponse(stand_types=_service.list_stand_types())


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
