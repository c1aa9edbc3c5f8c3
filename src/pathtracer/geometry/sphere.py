"""Sphere primitive with ray-sphere intersection.

The sphere is the only primitive in the renderer. Each sphere carries its
own emission, reflectance and material tag, so the scene is just an ordered
list of spheres.

Intersection substitutes the ray p(t) = o + t d into |p - c|^2 = r^2. With
a unit direction this reduces to

    t = b +/- sqrt(b^2 - |c - o|^2 + r^2),   b = (c - o) . d

The nearer root is used unless it lies within EPSILON of the ray origin, in
which case the farther root is tried. This keeps rays leaving a surface from
hitting that same surface again.

Example:
    >>> from pathtracer.core.ray import make_ray, vec3
    >>> sphere = Sphere(1.0, vec3(0, 0, -5), vec3(), vec3(0.5, 0.5, 0.5))
    >>> ray = make_ray(vec3(0, 0, 0), vec3(0, 0, -1))
    >>> sphere.intersect(ray)
    4.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from pathtracer.core.ray import Color, Point3, Ray

# Minimum hit distance, rejects self-intersections at the ray origin
EPSILON = 1e-4


class MaterialType(IntEnum):
    """Enumeration of supported material types.

    Used by the integrator to select the scattering behavior of a hit.
    """

    DIFFUSE = 0
    SPECULAR = 1
    REFRACT = 2


@dataclass(frozen=True, slots=True)
class Sphere:
    """A sphere with geometry and surface properties.

    Attributes:
        radius: The radius of the sphere (positive).
        center: The center point of the sphere.
        emission: Emitted radiance (zero for non-emitters).
        reflectance: Surface albedo per channel, by convention in [0, 1].
        material: How the surface scatters light.
    """

    radius: float
    center: Point3
    emission: Color
    reflectance: Color
    material: MaterialType = MaterialType.DIFFUSE

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError(f"Sphere radius must be positive, got {self.radius}")

    def intersect(self, ray: Ray) -> float | None:
        """Find the nearest intersection distance along the ray.

        Args:
            ray: The ray to test. Its direction must be unit length.

        Returns:
            The distance to the nearest hit beyond EPSILON, or None if the
            ray misses the sphere.
        """
        return hit_sphere(ray, self)


def hit_sphere(ray: Ray, sphere: Sphere) -> float | None:
    """Test for ray-sphere intersection.

    Args:
        ray: The ray to test (unit direction).
        sphere: The sphere to intersect.

    Returns:
        The hit distance, or None on a miss.
    """
    origin = ray.origin
    direction = ray.direction
    center = sphere.center

    # Vector from ray origin to sphere center
    ocx = center.x - origin.x
    ocy = center.y - origin.y
    ocz = center.z - origin.z

    neg_b = ocx * direction.x + ocy * direction.y + ocz * direction.z
    discriminant = neg_b * neg_b - (ocx * ocx + ocy * ocy + ocz * ocz) + sphere.radius * sphere.radius
    if discriminant < 0.0:
        return None

    sqrt_d = math.sqrt(discriminant)

    t = neg_b - sqrt_d
    if t > EPSILON:
        return t

    t = neg_b + sqrt_d
    if t > EPSILON:
        return t

    return None
