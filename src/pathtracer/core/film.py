"""Film: the RGB accumulation buffer the renderer writes into.

The film stores one linear RGB float triple per pixel in a NumPy array of
shape (height, width, 3). Pixel (x, y) uses the camera's film coordinates,
so row y = 0 is the bottom of the view.

During rendering each worker writes only the pixels of the rows it owns, so
writes from concurrent workers never touch the same element. The buffer is
not read back until the render is finished.

Example:
    >>> film = Film(1024, 768)
    >>> film.add_color(10, 20, vec3(0.5, 0.25, 0.125))
    >>> image = film.to_numpy()  # (768, 1024, 3), top row first
    >>> film.store_image("image.bmp")
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt

from pathtracer.core.ray import Color, vec3
from pathtracer.preview.export import save_bmp


class Film:
    """A dense 2D array of accumulated pixel colors.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate a zeroed film.

        Args:
            width: Image width in pixels.
            height: Image height in pixels.

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Film dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def resolution(self) -> tuple[int, int]:
        return self._width, self._height

    def add_color(self, x: int, y: int, delta: Color) -> None:
        """Add a color contribution to pixel (x, y)."""
        pixel = self._pixels[y, x]
        pixel[0] += delta.x
        pixel[1] += delta.y
        pixel[2] += delta.z

    def pixel(self, x: int, y: int) -> Color:
        """Get the accumulated color of pixel (x, y)."""
        r, g, b = self._pixels[y, x]
        return vec3(float(r), float(g), float(b))

    def clear(self) -> None:
        self._pixels.fill(0.0)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Get the film as a clamped linear image.

        Returns:
            Array of shape (height, width, 3) with values in [0, 1] and the
            top row of the view first, the usual image layout.
        """
        image = np.flipud(self._pixels)
        return np.clip(image, 0.0, 1.0)

    def store_image(self, filepath: str | Path, gamma: float = 2.2) -> Path:
        """Encode the film and write it as a bitmap.

        Args:
            filepath: Output path, typically ending in .bmp.
            gamma: Gamma encoding exponent denominator.

        Returns:
            The path written.
        """
        return save_bmp(self.to_numpy(), filepath, gamma=gamma)

    def __repr__(self) -> str:
        return f"Film(width={self._width}, height={self._height})"
