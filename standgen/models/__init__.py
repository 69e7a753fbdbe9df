from .geometry import Point3D, Vector3D, Size3D, direction_from_points
from .spec import (
    StandDimensions, ProductDimensions, Layout, SpecMetadata, Spec, SPEC_A, SPEC_B,
)
from .stand import StandType, StandSpec, StandTypeInfo
from .parameters import SpecDefaults, StandFormData, GenerationConfig, DEFAULTS
from .materials import MaterialRole, SurfaceMap, SurfaceMapKind, SurfaceMaterial
from .scene import (
    NodeKind, PartType, SceneNode, SceneStats, BuildMetadata, BuiltStand,
)
from .contract import (
    Contract, ContractStand, ContractProduct, Arrangement, Checksum,
    CAMERA_DIRECTIVE, FORBIDDEN_MUTATIONS,
)
from .context import BuildContext

__all__ = [
    "Point3D", "Vector3D", "Size3D", "direction_from_points",
    "StandDimensions", "ProductDimensions", "Layout", "SpecMetadata", "Spec",
    "SPEC_A", "SPEC_B",
    "StandType", "StandSpec", "StandTypeInfo",
    "SpecDefaults", "StandFormData", "GenerationConfig", "DEFAULTS",
    "MaterialRole", "SurfaceMap", "SurfaceMapKind", "SurfaceMaterial",
    "NodeKind", "PartType", "SceneNode", "SceneStats", "BuildMetadata", "BuiltStand",
    "Contract", "ContractStand", "ContractProduct", "Arrangement", "Checksum",
    "CAMERA_DIRECTIVE", "FORBIDDEN_MUTATIONS",
    "BuildContext",
]
