"""Geometry module for shape primitives.

Components:
    sphere: Sphere primitive, material tag and ray-sphere intersection

Spheres are intersected brute force; the scene is small enough that no
acceleration structure is used.
"""

from .sphere import EPSILON, MaterialType, Sphere, hit_sphere

__all__ = [
    "EPSILON",
    "MaterialType",
    "Sphere",
    "hit_sphere",
]
