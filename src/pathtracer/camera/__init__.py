"""Camera module for primary ray generation.

Components:
    pinhole: Pinhole camera with a fixed film basis

Film coordinates are in pixels, x to the right and y up, so row 0 is the
bottom of the view.
"""

from .pinhole import DEFAULT_FOV, NEAR_PLANE_DISTANCE, PinholeCamera

__all__ = [
    "PinholeCamera",
    "DEFAULT_FOV",
    "NEAR_PLANE_DISTANCE",
]
