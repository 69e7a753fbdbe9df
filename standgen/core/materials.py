"""Shared materials for the three surface roles."""

from __future__ import annotations

from standgen.models import MaterialRole, SurfaceMap, SurfaceMapKind, SurfaceMaterial
from standgen.core.surface import create_normal_map_data, create_roughness_map_data

NORMAL_MAP_SIZE = 64
NORMAL_MAP_INTENSITY = 0.1
ROUGHNESS_MAP_SIZE = 32
ROUGHNESS_BAND = (0.3, 0.6)


def _derived_seed(seed: int | None, offset: int) -> int | None:
    # One stream per map
    return None if seed is None else seed + offset


def create_stand_materials(seed: int | None = None) -> dict[MaterialRole, SurfaceMaterial]:
    """Structure, shelf and product materials for one build."""
    normal_seed = _derived_seed(seed, 0)
    roughness_seed = _derived_seed(seed, 1)

    normal_map = SurfaceMap(
        kind=SurfaceMapKind.NORMAL,
        width=NORMAL_MAP_SIZE,
        height=NORMAL_MAP_SIZE,
        channels=3,
        seed=normal_seed,
        data=create_normal_map_data(
            NORMAL_MAP_SIZE, NORMAL_MAP_SIZE, NORMAL_MAP_INTENSITY, seed=normal_seed,
        ),
    )
    roughness_map = SurfaceMap(
        kind=SurfaceMapKind.ROUGHNESS,
        width=ROUGHNESS_MAP_SIZE,
        height=ROUGHNESS_MAP_SIZE,
        channels=1,
        seed=roughness_seed,
        data=create_roughness_map_data(
            ROUGHNESS_MAP_SIZE, ROUGHNESS_MAP_SIZE, *ROUGHNESS_BAND, seed=roughness_seed,
        ),
    )

    return {
        MaterialRole.STRUCTURE: SurfaceMaterial(
            name="StandMaterial",
            role=MaterialRole.STRUCTURE,
            color="#4a90e2",
            roughness=0.3,
            metalness=0.1,
            clearcoat=0.8,
            clearcoat_roughness=0.1,
            reflectivity=0.9,
            normal_map=normal_map,
            normal_scale=0.3,
        ),
        MaterialRole.SHELF: SurfaceMaterial(
            name="ShelfMaterial",
            role=MaterialRole.SHELF,
            color="#7ed321",
            roughness=0.4,
            metalness=0.0,
            clearcoat=0.5,
            clearcoat_roughness=0.2,
            reflectivity=0.7,
            roughness_map=roughness_map,
        ),
        MaterialRole.PRODUCT: SurfaceMaterial(
            name="ProductMaterial",
            role=MaterialRole.PRODUCT,
            color="#f5a623",
            roughness=0.6,
            metalness=0.0,
            clearcoat=0.2,
            clearcoat_roughness=0.3,
            reflectivity=0.5,
        ),
    }
