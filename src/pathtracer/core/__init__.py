"""Core rendering module.

This module contains the fundamental building blocks for path tracing:

Components:
    ray: Vector3, Ray and vector utilities
    rng: Seedable random source
    sampler: Per-pixel sampling strategies (random, stratified tent)
    integrator: Recursive radiance estimator
    film: RGB accumulation buffer
    renderer: Scanline-parallel render loop

The integrator implements Monte Carlo path tracing with cosine-weighted
importance sampling, Fresnel-weighted dielectric splitting and Russian
roulette termination.
"""

from .film import Film
from .ray import (
    Color,
    Point3,
    Ray,
    Vector3,
    build_onb_from_normal,
    local_to_world,
    make_ray,
    ray_at,
    reflect,
    vec3,
)
from .rng import DEFAULT_SEED, RandomSource
from .sampler import (
    CameraSample,
    RandomSampler,
    Sampler,
    StratifiedTentSampler,
    create_sampler,
    sample_tent,
)

# Note: integrator and renderer are NOT imported here to avoid circular imports.
# Import directly from pathtracer.core.integrator or pathtracer.core.renderer.

__all__ = [
    "Vector3",
    "vec3",
    "Point3",
    "Color",
    "Ray",
    "make_ray",
    "ray_at",
    "reflect",
    "build_onb_from_normal",
    "local_to_world",
    "RandomSource",
    "DEFAULT_SEED",
    "CameraSample",
    "Sampler",
    "RandomSampler",
    "StratifiedTentSampler",
    "create_sampler",
    "sample_tent",
    "Film",
]
