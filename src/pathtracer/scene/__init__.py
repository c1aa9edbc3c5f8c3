"""Scene module: the sphere collection and its configuration.

Components:
    intersection: Scene container and nearest-hit queries
    cornell_box: The nine-sphere Cornell box and its camera
"""

from .cornell_box import (
    IMAGE_HEIGHT,
    IMAGE_WIDTH,
    create_cornell_box_scene,
    create_cornell_box_spheres,
)
from .intersection import MISS_DISTANCE, Scene, SceneHitRecord

__all__ = [
    "Scene",
    "SceneHitRecord",
    "MISS_DISTANCE",
    "create_cornell_box_scene",
    "create_cornell_box_spheres",
    "IMAGE_WIDTH",
    "IMAGE_HEIGHT",
]
