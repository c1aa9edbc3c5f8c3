"""Cornell box scene configuration.

This module provides a factory function for the sphere-only Cornell box:
five walls, floor and ceiling built from very large spheres, a mirror ball,
a glass ball, and a large emissive sphere poking through the ceiling as the
light.

Coordinate system:
- X-axis: left (x = 1) to right (x = 99) wall
- Y-axis: floor (y = 0) to ceiling (y = 81.6)
- Z-axis: back wall (z = 0) toward the front wall (z = 170); the camera sits
  at z = 295.6 looking toward -Z

The numeric values below define the reference image and are kept exactly.

Example:
    >>> from pathtracer.scene.cornell_box import create_cornell_box_scene
    >>> scene, camera = create_cornell_box_scene()
    >>> len(scene)
    9
"""

from __future__ import annotations

from pathtracer.camera.pinhole import DEFAULT_FOV, PinholeCamera
from pathtracer.core.ray import vec3
from pathtracer.geometry.sphere import MaterialType, Sphere
from pathtracer.scene.intersection import Scene

# =============================================================================
# Cornell Box Constants
# =============================================================================

# Fixed output resolution
IMAGE_WIDTH = 1024
IMAGE_HEIGHT = 768

# Radius of the spheres standing in for planar walls
WALL_RADIUS = 1e5

# Wall colors
RED_WALL_ALBEDO = (0.75, 0.25, 0.25)
BLUE_WALL_ALBEDO = (0.25, 0.25, 0.75)
WHITE_WALL_ALBEDO = (0.75, 0.75, 0.75)

# Mirror and glass balls reflect almost all light
BALL_RADIUS = 16.5
BALL_ALBEDO = (0.999, 0.999, 0.999)

# Light sphere
LIGHT_RADIUS = 600.0
LIGHT_EMISSION = (12.0, 12.0, 12.0)

# Camera
CAMERA_ORIGIN = (50.0, 52.0, 295.6)
CAMERA_DIRECTION = (0.0, -0.042612, -1.0)

BLACK = (0.0, 0.0, 0.0)


def _sphere(radius, center, emission, reflectance, material) -> Sphere:
    return Sphere(radius, vec3(*center), vec3(*emission), vec3(*reflectance), material)


def create_cornell_box_spheres() -> list[Sphere]:
    """Create the nine spheres of the Cornell box, in scene order.

    Returns:
        List of spheres: left, right, back, front, bottom, top walls, then
        the mirror ball, the glass ball and the light.
    """
    diffuse = MaterialType.DIFFUSE
    return [
        _sphere(WALL_RADIUS, (WALL_RADIUS + 1, 40.8, 81.6), BLACK, RED_WALL_ALBEDO, diffuse),  # Left
        _sphere(WALL_RADIUS, (-WALL_RADIUS + 99, 40.8, 81.6), BLACK, BLUE_WALL_ALBEDO, diffuse),  # Right
        _sphere(WALL_RADIUS, (50, 40.8, WALL_RADIUS), BLACK, WHITE_WALL_ALBEDO, diffuse),  # Back
        _sphere(WALL_RADIUS, (50, 40.8, -WALL_RADIUS + 170), BLACK, BLACK, diffuse),  # Front
        _sphere(WALL_RADIUS, (50, WALL_RADIUS, 81.6), BLACK, WHITE_WALL_ALBEDO, diffuse),  # Bottom
        _sphere(WALL_RADIUS, (50, -WALL_RADIUS + 81.6, 81.6), BLACK, WHITE_WALL_ALBEDO, diffuse),  # Top
        _sphere(BALL_RADIUS, (27, 16.5, 47), BLACK, BALL_ALBEDO, MaterialType.SPECULAR),  # Mirror
        _sphere(BALL_RADIUS, (73, 16.5, 78), BLACK, BALL_ALBEDO, MaterialType.REFRACT),  # Glass
        _sphere(LIGHT_RADIUS, (50, 681.6 - 0.27, 81.6), LIGHT_EMISSION, BLACK, diffuse),  # Light
    ]


def create_cornell_box_scene(
    width: int = IMAGE_WIDTH,
    height: int = IMAGE_HEIGHT,
) -> tuple[Scene, PinholeCamera]:
    """Create the Cornell box scene and its camera.

    Args:
        width: Film width in pixels. Default is 1024.
        height: Film height in pixels. Default is 768.

    Returns:
        A tuple of (Scene, PinholeCamera).

    Example:
        >>> scene, camera = create_cornell_box_scene()
        >>> scene[8].emission.to_tuple()
        (12.0, 12.0, 12.0)
    """
    scene = Scene(create_cornell_box_spheres())
    camera = PinholeCamera(
        origin=CAMERA_ORIGIN,
        direction=CAMERA_DIRECTION,
        width=width,
        height=height,
        fov=DEFAULT_FOV,
    )
    return scene, camera
