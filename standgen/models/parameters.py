"""Form input and generation defaults."""

from __future__ import annotations
import math
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class SpecDefaults(BaseModel):
    """Fallback values applied when a form field is missing or unusable."""
    stand_width: float = 15.0          # cm
    stand_depth: float = 30.0          # cm
    stand_height: float = 30.0         # cm
    shelf_thickness: float = 2.0       # Fixed, not user-adjustable
    product_width: float = 13.0
    product_height: float = 5.0
    product_depth: float = 2.5
    front_face_count: int = 1
    back_to_back_count: int = 12
    gaps_depth: float = 0.0            # Tight packaging
    shelf_count: int = 1
    stand_type: str = "Tabletop Stand"

    # Floor stands below this height are treated as tabletop-scale input
    floor_autoscale_threshold: float = 50.0
    floor_min_height: float = 120.0
    floor_height_per_shelf: float = 25.0
    floor_height_margin: float = 20.0

    def floor_height(self, shelf_count: int) -> float:
        return max(
            self.floor_min_height,
            shelf_count * self.floor_height_per_shelf + self.floor_height_margin,
        )


DEFAULTS = SpecDefaults()

# Form counts above these are treated as garbage
MAX_SHELF_COUNT = 50
MAX_GRID_COUNT = 500


def _positive_number(value: Any) -> float | None:
    """Finite number > 0, or None. Strings are parsed, bools rejected."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            value = float(value.replace(",", "."))
        except (ValueError, OverflowError):
            return None
    if not isinstance(value, (int, float)):
        return None
    try:
        value = float(value)
    except OverflowError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def _bounded_count(value: Any, ceiling: int) -> int | None:
    """Whole count in [1, ceiling], or None."""
    number = _positive_number(value)
    if number is None or number < 1 or number > ceiling:
        return None
    return int(math.floor(number))


class StandFormData(BaseModel):
    """
    Loosely-typed form input. Every field is optional.

    Garbage, zero, negative or non-finite values are coerced to None so the
    spec generator falls back to its defaults instead of failing.
    Accepts camelCase keys (as the form layer sends them) or snake_case.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    stand_width: float | None = None
    stand_depth: float | None = None
    stand_height: float | None = None
    shelf_count: int | None = None
    product_width: float | None = None
    product_height: float | None = None
    product_depth: float | None = None
    front_face_count: int | None = None
    back_to_back_count: int | None = None
    gaps_depth: float | None = None
    stand_type: str | None = None

    @field_validator(
        "stand_width", "stand_depth", "stand_height",
        "product_width", "product_height", "product_depth",
        mode="before",
    )
    @classmethod
    def _lenient_dimension(cls, value: Any) -> float | None:
        return _positive_number(value)

    @field_validator("shelf_count", mode="before")
    @classmethod
    def _lenient_shelf_count(cls, value: Any) -> int | None:
        return _bounded_count(value, MAX_SHELF_COUNT)

    @field_validator("front_face_count", "back_to_back_count", mode="before")
    @classmethod
    def _lenient_grid_count(cls, value: Any) -> int | None:
        return _bounded_count(value, MAX_GRID_COUNT)

    @field_validator("gaps_depth", mode="before")
    @classmethod
    def _lenient_gap(cls, value: Any) -> float | None:
        if isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0:
            return 0.0
        return _positive_number(value)

    @field_validator("stand_type", mode="before")
    @classmethod
    def _lenient_label(cls, value: Any) -> str | None:
        if not isinstance(value, str) or not value.strip():
            return None
        return value

    @classmethod
    def from_raw(cls, raw: StandFormData | dict[str, Any] | None) -> StandFormData:
        if raw is None:
            return cls()
        if isinstance(raw, StandFormData):
            return raw
        return cls.model_validate(dict(raw))


class GenerationConfig(BaseModel):
    """Per-request knobs that are not part of the dimensional spec."""
    seed: int | None = Field(default=None, ge=0)  # Surface-variation RNG seed
    include_dimensions: bool = True         # Attach standard dimension lines
    defaults: SpecDefaults = Field(default_factory=SpecDefaults)
