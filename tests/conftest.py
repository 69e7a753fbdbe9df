"""
Shared test fixtures for the stand geometry engine.
"""
import pytest

from standgen.models import SPEC_A, SPEC_B, StandType
from standgen.core.generator import StandGenerator, build_stand_group
from standgen.core.spec_generator import generate_spec_from_form_data

ALL_STAND_TYPES = [t.value for t in StandType]
NON_TIERED_STAND_TYPES = [t.value for t in StandType if t != StandType.MULTI_TIER]


@pytest.fixture
def spec_a():
    """15x30x30 tabletop stand, 13x5x2.5 product, 1x12 zero-gap queue."""
    return SPEC_A


@pytest.fixture
def spec_b():
    """Same stand as SPEC_A with a 1x9 queue and 0.8cm gaps."""
    return SPEC_B


@pytest.fixture
def wide_form():
    """A wide, deep two-shelf configuration with a 3x4 grid."""
    return {
        "standWidth": 45,
        "standDepth": 50,
        "standHeight": 90,
        "shelfCount": 2,
        "productWidth": 12,
        "productHeight": 10,
        "productDepth": 8,
        "frontFaceCount": 3,
        "backToBackCount": 4,
        "gapsDepth": 1,
    }


@pytest.fixture
def wide_spec(wide_form):
    return generate_spec_from_form_data(wide_form)


@pytest.fixture
def generator():
    return StandGenerator()


@pytest.fixture
def built_tabletop(spec_a):
    return build_stand_group(spec_a, {"standType": "Tabletop Stand"}, seed=7)
