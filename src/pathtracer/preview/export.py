"""Image export utilities for rendered images.

This module turns a linear, [0, 1]-clamped float image into 8-bit
gamma-encoded pixels and writes it to disk with Pillow.

Supported formats:
    - BMP (24-bit, BGR byte order, bottom-to-top rows padded to 4 bytes)

Example:
    >>> from pathtracer.preview.export import save_bmp
    >>> save_bmp(film.to_numpy(), "image.bmp")
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

DEFAULT_GAMMA = 2.2


def gamma_encode(
    image: npt.NDArray[np.floating],
    gamma: float = DEFAULT_GAMMA,
) -> npt.NDArray[np.uint8]:
    """Convert a linear float image to gamma-encoded 8-bit values.

    Each channel becomes int(clamp(x) ** (1 / gamma) * 255 + 0.5), i.e. the
    scaled value rounded half up.

    Args:
        image: Linear image array of shape (H, W, 3).
        gamma: Gamma value (default 2.2).

    Returns:
        8-bit image array of shape (H, W, 3) with dtype uint8.
    """
    clamped = np.clip(np.asarray(image, dtype=np.float64), 0.0, 1.0)
    encoded = np.power(clamped, 1.0 / gamma) * 255.0 + 0.5
    return np.floor(encoded).astype(np.uint8)


def save_bmp(
    image: npt.NDArray[np.floating],
    filepath: str | Path,
    *,
    gamma: float = DEFAULT_GAMMA,
) -> Path:
    """Save a linear image as a 24-bit bitmap.

    Args:
        image: Linear image array of shape (H, W, 3), top row first.
        filepath: Output file path.
        gamma: Gamma value used for encoding (default 2.2).

    Returns:
        The output path.
    """
    output = Path(filepath)
    image_uint8 = gamma_encode(image, gamma)

    pil_image = PILImage.fromarray(image_uint8)
    pil_image.save(output, format="BMP")
    return output
