"""Render configuration.

RenderSettings gathers everything a render needs beyond the scene itself.
The resolution defaults to the fixed 1024x768 of the reference scene; the
sample budget is the total number of samples per pixel, which the stratified
sampler divides across its four sub-pixels.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pathtracer.core.rng import DEFAULT_SEED
from pathtracer.core.sampler import SAMPLER_TYPES, Sampler, create_sampler
from pathtracer.scene.cornell_box import IMAGE_HEIGHT, IMAGE_WIDTH

logger = logging.getLogger(__name__)

# Total samples per pixel when none (or an invalid value) is given
DEFAULT_SAMPLE_BUDGET = 40

DEFAULT_OUTPUT = "image.bmp"


def parse_sample_budget(text: str | None) -> int:
    """Parse the sample budget given on the command line.

    Never raises: a missing, unparsable or non-positive value falls back to
    DEFAULT_SAMPLE_BUDGET.

    Args:
        text: The raw argument, or None if it was not given.

    Returns:
        A positive sample budget.
    """
    if text is None:
        return DEFAULT_SAMPLE_BUDGET

    try:
        budget = int(text)
    except ValueError:
        logger.warning(
            "Invalid sample count %r, using default of %d", text, DEFAULT_SAMPLE_BUDGET
        )
        return DEFAULT_SAMPLE_BUDGET

    if budget <= 0:
        logger.warning(
            "Sample count must be positive, got %d; using default of %d",
            budget,
            DEFAULT_SAMPLE_BUDGET,
        )
        return DEFAULT_SAMPLE_BUDGET
    return budget


@dataclass
class RenderSettings:
    """Parameters for one render.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        sample_budget: Total samples per pixel.
        seed: Seed for the sampler's random source.
        sampler: Sampler kind, "tent" (stratified) or "random".
        workers: Number of render threads, None for one per CPU.
        output: Output image path.
    """

    width: int = IMAGE_WIDTH
    height: int = IMAGE_HEIGHT
    sample_budget: int = DEFAULT_SAMPLE_BUDGET
    seed: int = DEFAULT_SEED
    sampler: str = "tent"
    workers: int | None = None
    output: str = DEFAULT_OUTPUT

    def __post_init__(self) -> None:
        if self.sampler not in SAMPLER_TYPES:
            raise ValueError(
                f"Unknown sampler '{self.sampler}', expected one of {sorted(SAMPLER_TYPES)}"
            )
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {self.width}x{self.height}")

    def create_sampler(self) -> Sampler:
        """Build the prototype sampler described by these settings."""
        return create_sampler(self.sampler, self.sample_budget, self.seed)
