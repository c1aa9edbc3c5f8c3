"""Ray data structure and vector utilities for CPU path tracing.

This module provides the Vector3 type used for positions, directions and
colors alike, the Ray dataclass, and the small set of vector helpers the
integrator needs (reflection, orthonormal basis construction).

Vector3 is a plain value type. The same class is reused through the aliases
``vec3``, ``Point3`` and ``Color``; component-wise multiplication is only
meaningful for colors.

Example:
    >>> origin = vec3(0.0, 0.0, 0.0)
    >>> direction = vec3(0.0, 0.0, -1.0)
    >>> ray = make_ray(origin, direction)
    >>> point = ray_at(ray, 5.0)  # Point 5 units along the ray
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Tolerance used when checking that ray directions are unit length
UNIT_LENGTH_TOLERANCE = 1e-6


class Vector3:
    """Three floats used as a point, a direction or an RGB color.

    Attributes:
        x: First component (red when used as a color).
        y: Second component (green when used as a color).
        z: Third component (blue when used as a color).
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = x
        self.y = y
        self.z = z

    # Color channel views
    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other: float | Vector3) -> Vector3:
        # Component-wise product is only used for color tinting
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"

    def dot(self, other: Vector3) -> float:
        """Compute the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Compute the cross product self x other."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector3:
        """Scale this vector to unit length in place.

        Normalizing a zero-length vector is a caller bug and raises
        ZeroDivisionError rather than producing NaN components.

        Returns:
            This vector, to allow chaining.
        """
        inv_length = 1.0 / math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        self.x *= inv_length
        self.y *= inv_length
        self.z *= inv_length
        return self

    def max_component(self) -> float:
        return max(self.x, self.y, self.z)

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


# Type aliases, matching the roles a Vector3 plays in the renderer
vec3 = Vector3
Point3 = Vector3
Color = Vector3


@dataclass(slots=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction of the ray. Must be unit length; use
            make_ray() to build rays that are checked.
    """

    origin: Point3
    direction: Vector3


def make_ray(origin: Point3, direction: Vector3) -> Ray:
    """Create a ray, asserting that its direction is normalized.

    Args:
        origin: The starting point of the ray.
        direction: The direction vector (must be unit length).

    Returns:
        A new Ray instance.
    """
    assert abs(direction.length() - 1.0) < UNIT_LENGTH_TOLERANCE, (
        f"ray direction must be unit length, got {direction!r}"
    )
    return Ray(origin, direction)


def ray_at(ray: Ray, t: float) -> Point3:
    """Compute the point along the ray at parameter t.

    Args:
        ray: The ray to evaluate.
        t: The parameter value. Positive values are in front of the origin.

    Returns:
        The point ray.origin + t * ray.direction.
    """
    return ray.origin + ray.direction * t


# =============================================================================
# Vector Utility Functions
# =============================================================================


def reflect(incident: Vector3, normal: Vector3) -> Vector3:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction vector (pointing toward the surface).
        normal: The surface normal (should be normalized). Either side of the
            surface gives the same result.

    Returns:
        The mirror direction incident - 2 (n . incident) n.
    """
    return incident - normal * (2.0 * normal.dot(incident))


def build_onb_from_normal(normal: Vector3) -> tuple[Vector3, Vector3, Vector3]:
    """Build an orthonormal basis from a normal vector.

    The helper axis is the world x axis unless the normal is close to it,
    in which case the y axis is used, so the cross product never degenerates.

    Args:
        normal: The surface normal (should be normalized).

    Returns:
        A tuple (tangent, bitangent, normal) forming an orthonormal basis.
    """
    a = vec3(0.0, 1.0, 0.0) if abs(normal.x) > 0.1 else vec3(1.0, 0.0, 0.0)
    tangent = a.cross(normal).normalize()
    bitangent = normal.cross(tangent)
    return tangent, bitangent, normal


def local_to_world(
    local_dir: Vector3, tangent: Vector3, bitangent: Vector3, normal: Vector3
) -> Vector3:
    """Transform a direction from local (z-up) to world coordinates."""
    return tangent * local_dir.x + bitangent * local_dir.y + normal * local_dir.z
