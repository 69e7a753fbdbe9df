"""Procedural surface variation for materials.

Both generators return flat uint8 arrays (not an image format). Randomness
comes from a per-call generator, so passing a seed makes the output
reproducible.
"""

from __future__ import annotations
import numpy as np


def _rng(seed: int | None) -> np.random.Generator:
    return np.random.default_rng(seed)


def _check_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"Surface map size must be positive, got {width}x{height}")


def create_normal_map_data(
    width: int,
    height: int,
    intensity: float,
    seed: int | None = None,
) -> np.ndarray:
    """
    Tangent-space normal perturbations, RGB-interleaved, length 3*w*h.

    Each texel tilts the flat (0, 0, 1) normal by noise in
    [-intensity/2, intensity/2) on X and half that on Y, renormalises, and
    encodes every component as floor((v * 0.5 + 0.5) * 255).
    """
    _check_size(width, height)
    size = width * height
    noise = (_rng(seed).random(size) - 0.5) * intensity

    normals = np.empty((size, 3), dtype=np.float64)
    normals[:, 0] = noise
    normals[:, 1] = noise * 0.5
    normals[:, 2] = 1.0
    normals /= np.linalg.norm(normals, axis=1, keepdims=True)

    encoded = np.floor((normals * 0.5 + 0.5) * 255)
    return encoded.astype(np.uint8).reshape(-1)


def create_roughness_map_data(
    width: int,
    height: int,
    min_roughness: float,
    max_roughness: float,
    seed: int | None = None,
) -> np.ndarray:
    """Per-texel roughness in [min, max), encoded as floor(r * 255), length w*h."""
    _check_size(width, height)
    if not 0.0 <= min_roughness <= max_roughness <= 1.0:
        raise ValueError(
            f"Roughness band must satisfy 0 <= min <= max <= 1, "
            f"got [{min_roughness}, {max_roughness}]"
        )
    noise = _rng(seed).random(width * height)
    roughness = min_roughness + (max_roughness - min_roughness) * noise
    return np.floor(roughness * 255).astype(np.uint8)
