"""Scene-level ray intersection.

A Scene is a fixed, ordered collection of spheres. It is built once and only
read during rendering, so a single instance is shared by every render worker
without locking.

Intersection is brute force: every sphere is tested and the globally nearest
hit is kept.

Example:
    >>> from pathtracer.core.ray import make_ray, vec3
    >>> from pathtracer.geometry.sphere import Sphere
    >>> scene = Scene([Sphere(1.0, vec3(0, 0, -5), vec3(), vec3(0.8, 0.8, 0.8))])
    >>> record = scene.intersect(make_ray(vec3(0, 0, 0), vec3(0, 0, -1)))
    >>> record.hit, record.t, record.sphere_index
    (True, 4.0, 0)
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from pathtracer.core.ray import Ray
from pathtracer.geometry.sphere import Sphere, hit_sphere

# Distance reported when a ray hits nothing
MISS_DISTANCE = math.inf


@dataclass(frozen=True, slots=True)
class SceneHitRecord:
    """Result of a ray-scene intersection query.

    Attributes:
        t: Distance to the nearest hit, MISS_DISTANCE if nothing was hit.
        sphere_index: Index of the hit sphere in the scene, -1 on a miss.
        sphere: The hit sphere, None on a miss.
    """

    t: float
    sphere_index: int
    sphere: Sphere | None

    @property
    def hit(self) -> bool:
        return self.sphere is not None


_MISS = SceneHitRecord(t=MISS_DISTANCE, sphere_index=-1, sphere=None)


class Scene:
    """An immutable, ordered collection of spheres."""

    def __init__(self, spheres: Iterable[Sphere]) -> None:
        self._spheres = tuple(spheres)

    @property
    def spheres(self) -> tuple[Sphere, ...]:
        return self._spheres

    def __len__(self) -> int:
        return len(self._spheres)

    def __iter__(self) -> Iterator[Sphere]:
        return iter(self._spheres)

    def __getitem__(self, index: int) -> Sphere:
        return self._spheres[index]

    def intersect(self, ray: Ray) -> SceneHitRecord:
        """Find the nearest sphere hit by the ray.

        Args:
            ray: The ray to trace (unit direction).

        Returns:
            A SceneHitRecord for the closest hit, or a miss record.
        """
        nearest_t = MISS_DISTANCE
        nearest_index = -1
        for index, sphere in enumerate(self._spheres):
            t = hit_sphere(ray, sphere)
            if t is not None and t < nearest_t:
                nearest_t = t
                nearest_index = index

        if nearest_index < 0:
            return _MISS
        return SceneHitRecord(
            t=nearest_t, sphere_index=nearest_index, sphere=self._spheres[nearest_index]
        )

    def __repr__(self) -> str:
        return f"Scene(spheres={len(self._spheres)})"
