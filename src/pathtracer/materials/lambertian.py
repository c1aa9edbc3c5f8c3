"""Lambertian (ideal diffuse) material sampling.

Diffuse surfaces scatter light equally in all directions. Their BRDF is
albedo / pi, and directions are importance sampled with a cosine-weighted
hemisphere distribution whose pdf is cos(theta) / pi.

Example:
    >>> direction, pdf = sample_cosine_hemisphere(normal, u1, u2)
"""

from __future__ import annotations

import math

from pathtracer.core.ray import Color, Vector3, build_onb_from_normal, local_to_world, vec3


def lambertian_brdf(albedo: Color) -> Color:
    """Evaluate the Lambertian BRDF, albedo / pi."""
    return albedo * (1.0 / math.pi)


def cosine_hemisphere_pdf(cos_theta: float) -> float:
    """Pdf of the cosine-weighted hemisphere distribution."""
    return cos_theta / math.pi


def random_cosine_direction(u1: float, u2: float) -> Vector3:
    """Cosine-weighted direction in the local frame (z-up).

    Args:
        u1: Uniform variate in [0, 1) for the azimuth phi = 2 pi u1.
        u2: Uniform variate in [0, 1) for the elevation.

    Returns:
        (cos(phi) sqrt(u2), sin(phi) sqrt(u2), sqrt(1 - u2)).
    """
    phi = 2.0 * math.pi * u1
    sqrt_u2 = math.sqrt(u2)
    return vec3(math.cos(phi) * sqrt_u2, math.sin(phi) * sqrt_u2, math.sqrt(1.0 - u2))


def sample_cosine_hemisphere(normal: Vector3, u1: float, u2: float) -> tuple[Vector3, float]:
    """Cosine-weighted hemisphere sampling around a normal.

    Args:
        normal: The shading normal defining the hemisphere (unit length).
        u1: Uniform variate in [0, 1) for the azimuth.
        u2: Uniform variate in [0, 1) for the elevation.

    Returns:
        A tuple of (direction, pdf) where direction is normalized and pdf is
        |cos(theta)| / pi with respect to the normal.
    """
    tangent, bitangent, w = build_onb_from_normal(normal)
    local_dir = random_cosine_direction(u1, u2)
    direction = local_to_world(local_dir, tangent, bitangent, w).normalize()

    pdf = cosine_hemisphere_pdf(abs(normal.dot(direction)))
    return direction, pdf
