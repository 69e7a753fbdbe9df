"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel, Field

from standgen.models import (
    Spec, Contract, BuiltStand, StandFormData, StandTypeInfo,
)
from standgen.core.validation import ValidationResult


class GenerateRequest(BaseModel):
    """Request body for the /generate endpoint."""
    form: StandFormData = StandFormData()
    seed: int | None = Field(default=None, ge=0)
    include_dimensions: bool = True


class GenerateResponse(BaseModel):
    """Response from the /generate endpoint."""
    spec: Spec
    contract: Contract
    stand: BuiltStand
    report: ValidationResult
    contract_ok: bool


class ContractResponse(BaseModel):
    contract: Contract
    constraint_text: str


class StandTypesResponse(BaseModel):
    stand_types: list[StandTypeInfo]
