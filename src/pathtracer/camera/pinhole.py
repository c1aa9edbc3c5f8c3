"""Pinhole camera model for perspective projection ray generation.

The camera is described by an eye position, a forward direction and a field
of view constant. From these it builds two film axes:

- cx: horizontal, along world +x, scaled by the aspect ratio and FOV
- cy: vertical, cx x forward normalized and scaled by the FOV

A film position (px, py) in pixels maps to the direction

    d = cx * (px / width - 0.5) + cy * (py / height - 0.5) + forward

Film row 0 is therefore the bottom of the view. Primary rays start
NEAR_PLANE_DISTANCE units along d, which places them inside the Cornell box
past its front wall.

Example:
    >>> from pathtracer.core.sampler import CameraSample
    >>> camera = PinholeCamera(
    ...     origin=(50.0, 52.0, 295.6),
    ...     direction=(0.0, -0.042612, -1.0),
    ...     width=1024,
    ...     height=768,
    ... )
    >>> ray = camera.generate_ray(CameraSample((512.0, 384.0)))
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pathtracer.core.ray import Ray, Vector3, make_ray, vec3
from pathtracer.core.sampler import CameraSample

# Field of view scale applied to both film axes
DEFAULT_FOV = 0.5135

# Distance along the unnormalized film direction at which primary rays start
NEAR_PLANE_DISTANCE = 140.0


@dataclass
class PinholeCamera:
    """Configuration for a pinhole (perspective) camera.

    Attributes:
        origin: Eye position in world space (x, y, z).
        direction: Forward direction (normalized on construction).
        width: Film width in pixels.
        height: Film height in pixels.
        fov: Field of view scale for the film axes.
        near_plane: Distance primary rays are advanced before tracing.
    """

    origin: tuple[float, float, float]
    direction: tuple[float, float, float]
    width: int
    height: int
    fov: float = DEFAULT_FOV
    near_plane: float = NEAR_PLANE_DISTANCE

    eye: Vector3 = field(init=False, repr=False)
    forward: Vector3 = field(init=False, repr=False)
    cx: Vector3 = field(init=False, repr=False)
    cy: Vector3 = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Film size must be positive, got {self.width}x{self.height}")

        self.eye = vec3(*self.origin)
        self.forward = vec3(*self.direction).normalize()

        # Horizontal axis: world +x scaled by aspect ratio and FOV
        self.cx = vec3(self.width * self.fov / self.height, 0.0, 0.0)
        # Vertical axis: perpendicular to cx and forward, pointing up
        self.cy = self.cx.cross(self.forward).normalize() * self.fov

    def generate_ray(self, camera_sample: CameraSample) -> Ray:
        """Generate the primary ray for a film sample.

        Args:
            camera_sample: Film position in pixels.

        Returns:
            A ray starting near_plane units in front of the eye, with a
            normalized direction.
        """
        px, py = camera_sample.p_film
        d = (
            self.cx * (px / self.width - 0.5)
            + self.cy * (py / self.height - 0.5)
            + self.forward
        )
        origin = self.eye + d * self.near_plane
        return make_ray(origin, d.normalize())

    def get_camera_info(self) -> dict[str, tuple[float, float, float]]:
        """Get the camera basis for debugging.

        Returns:
            Dictionary with origin, forward, cx and cy as tuples.
        """
        return {
            "origin": self.eye.to_tuple(),
            "forward": self.forward.to_tuple(),
            "cx": self.cx.to_tuple(),
            "cy": self.cy.to_tuple(),
        }
