"""Per-pixel sampling strategies.

A Sampler decides how many samples a pixel receives and where on the film
each one lands, and supplies the 1D/2D random numbers the integrator consumes
for its stochastic decisions.

Two interchangeable strategies are provided:
    - RandomSampler: every sample jitters the film position uniformly
      within the pixel.
    - StratifiedTentSampler: the pixel is split into a 2x2 grid of
      sub-pixels and each sub-pixel receives the requested number of samples,
      jittered with a tent (triangle) filter around the sub-pixel center.

Iteration protocol:
    >>> sampler = StratifiedTentSampler(samples_per_pixel=2)
    >>> sampler.start_pixel()
    >>> while True:
    ...     camera_sample = sampler.get_camera_sample((x, y))
    ...     ...  # trace a ray for camera_sample
    ...     if not sampler.start_next_sample():
    ...         break

Samplers carry mutable random state and must not be shared between
concurrent workers; each worker takes its own copy with clone().
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from pathtracer.core.rng import DEFAULT_SEED, RandomSource

# Type alias for a 2D film position
Point2 = tuple[float, float]

# 2x2 sub-pixel grid used by the stratified sampler
SUBPIXEL_GRID = 2
SUBPIXEL_COUNT = SUBPIXEL_GRID * SUBPIXEL_GRID


@dataclass(frozen=True)
class CameraSample:
    """A jittered sample position on the film plane.

    Attributes:
        p_film: Film-space position in pixels (x, y).
    """

    p_film: Point2


def sample_tent(u: float) -> float:
    """Warp a uniform variate into a tent distribution on [-1, 1).

    Uses the inverse CDF of the triangle filter: with r = 2u, values below 1
    map to sqrt(r) - 1 and the rest to 1 - sqrt(2 - r). The density peaks at
    zero and falls linearly to zero at both ends.

    Args:
        u: Uniform variate in [0, 1).

    Returns:
        Offset in [-1, 1).
    """
    r = 2.0 * u
    if r < 1.0:
        return math.sqrt(r) - 1.0
    return 1.0 - math.sqrt(2.0 - r)


class Sampler(ABC):
    """Interface shared by all per-pixel sampling strategies.

    Attributes:
        requested_samples: The sample count the sampler was created with.
            Strategies may multiply it (see samples_per_pixel).
        rng: The random source backing this sampler.
    """

    def __init__(
        self,
        samples_per_pixel: int,
        seed: int = DEFAULT_SEED,
        *,
        rng: RandomSource | None = None,
    ) -> None:
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
        self.requested_samples = samples_per_pixel
        self.rng = rng if rng is not None else RandomSource(seed)
        self._sample_index = 0

    @property
    def samples_per_pixel(self) -> int:
        """Total number of samples taken for each pixel."""
        return self.requested_samples

    @property
    def current_sample_index(self) -> int:
        return self._sample_index

    def clone(self, stream: int | None = None) -> Sampler:
        """Create an independent sampler with the same configuration.

        Args:
            stream: Optional stream key for the clone's random source. The
                renderer passes the row index so each row's random sequence
                depends only on the seed and the row.

        Returns:
            A new sampler of the same type with fresh random state.
        """
        return type(self)(self.requested_samples, rng=self.rng.spawn(stream))

    def start_pixel(self) -> None:
        """Reset the iteration state for a new pixel."""
        self._sample_index = 0

    def start_next_sample(self) -> bool:
        """Advance to the next sample.

        Returns:
            True if another sample remains for this pixel, False once the
            pixel is complete.
        """
        if self._sample_index >= self.requested_samples:
            return False
        self._sample_index += 1
        return self._sample_index < self.requested_samples

    def get_1d(self) -> float:
        """Return a uniform random number in [0, 1)."""
        return self.rng.uniform_float()

    def get_2d(self) -> tuple[float, float]:
        """Return a pair of uniform random numbers in [0, 1)."""
        return self.rng.uniform_float2()

    @abstractmethod
    def get_camera_sample(self, p_film: Point2) -> CameraSample:
        """Jitter a pixel origin into a film sample position.

        Args:
            p_film: The integer pixel coordinates (x, y) as floats.

        Returns:
            The CameraSample for the current sample.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(samples_per_pixel={self.samples_per_pixel})"


class RandomSampler(Sampler):
    """Uniform random jitter within the pixel."""

    def get_camera_sample(self, p_film: Point2) -> CameraSample:
        jitter_x, jitter_y = self.rng.uniform_float2()
        return CameraSample((p_film[0] + jitter_x, p_film[1] + jitter_y))


class StratifiedTentSampler(Sampler):
    """2x2 stratified sampling with a tent reconstruction filter.

    Sub-pixels are visited in order 0..3 (x = index % 2, y = index // 2) and
    each one receives requested_samples samples before moving on. Sample
    offsets are drawn from a tent distribution centered on the sub-pixel, so
    a sample may fall up to half a sub-pixel outside its own cell.
    """

    def __init__(
        self,
        samples_per_pixel: int,
        seed: int = DEFAULT_SEED,
        *,
        rng: RandomSource | None = None,
    ) -> None:
        super().__init__(samples_per_pixel, seed, rng=rng)
        self._subpixel_index = 0

    @property
    def samples_per_pixel(self) -> int:
        return self.requested_samples * SUBPIXEL_COUNT

    @property
    def current_stratum(self) -> int:
        """Index of the sub-pixel currently being sampled."""
        return self._subpixel_index

    def start_pixel(self) -> None:
        super().start_pixel()
        self._subpixel_index = 0

    def start_next_sample(self) -> bool:
        if self._subpixel_index >= SUBPIXEL_COUNT:
            return False

        self._sample_index += 1
        if self._sample_index < self.requested_samples:
            return True

        self._sample_index = 0
        self._subpixel_index += 1
        return self._subpixel_index < SUBPIXEL_COUNT

    def get_camera_sample(self, p_film: Point2) -> CameraSample:
        subpixel_x = self._subpixel_index % SUBPIXEL_GRID
        subpixel_y = self._subpixel_index // SUBPIXEL_GRID

        delta_x = sample_tent(self.rng.uniform_float())
        delta_y = sample_tent(self.rng.uniform_float())

        offset_x = (subpixel_x + delta_x + 0.5) / SUBPIXEL_GRID
        offset_y = (subpixel_y + delta_y + 0.5) / SUBPIXEL_GRID
        return CameraSample((p_film[0] + offset_x, p_film[1] + offset_y))


# =============================================================================
# Sampler Factory
# =============================================================================

SAMPLER_TYPES: dict[str, type[Sampler]] = {
    "tent": StratifiedTentSampler,
    "random": RandomSampler,
}


def create_sampler(kind: str, sample_budget: int, seed: int = DEFAULT_SEED) -> Sampler:
    """Create a sampler that spends roughly sample_budget samples per pixel.

    The stratified sampler multiplies its requested count by the four
    sub-pixels, so the budget is divided by four for it.

    Args:
        kind: "tent" or "random".
        sample_budget: Total samples per pixel wanted.
        seed: Seed for the sampler's random source.

    Returns:
        The configured sampler.

    Raises:
        ValueError: If kind is not a known sampler type.
    """
    if kind not in SAMPLER_TYPES:
        raise ValueError(f"Unknown sampler '{kind}', expected one of {sorted(SAMPLER_TYPES)}")

    if kind == "tent":
        requested = max(1, sample_budget // SUBPIXEL_COUNT)
    else:
        requested = max(1, sample_budget)
    return SAMPLER_TYPES[kind](requested, seed)
