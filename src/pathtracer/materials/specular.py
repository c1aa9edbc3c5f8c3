"""Ideal specular (mirror) material.

A perfect mirror reflects every incoming ray into exactly one direction,
so scattering is deterministic and needs no random numbers.
"""

from __future__ import annotations

from pathtracer.core.ray import Vector3, reflect


def mirror_direction(incident: Vector3, normal: Vector3) -> Vector3:
    """Compute the perfect mirror direction d - 2 (n . d) n.

    Args:
        incident: The incoming ray direction (unit length).
        normal: The geometric surface normal (unit length, either side).

    Returns:
        The reflected direction, unit length when both inputs are.
    """
    return reflect(incident, normal)
