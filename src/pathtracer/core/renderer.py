"""Scanline-parallel renderer.

The Renderer drives the per-pixel sample loop and dispatches image rows to a
thread pool. Rows are independent units of work:

- the Scene and the PathIntegrator are read-only and shared by all workers
- each row clones its own Sampler (keyed by the row index), so random state
  is never shared
- each row writes only its own pixels of the Film, so writes never overlap

The render returns once every row has finished. The sample loop is pure
Python and holds the GIL, so extra threads do not speed up a render; a full
1024x768 image at 4 spp takes several minutes.

Example:
    >>> from pathtracer.core.film import Film
    >>> from pathtracer.core.renderer import Renderer
    >>> from pathtracer.core.sampler import StratifiedTentSampler
    >>> from pathtracer.scene.cornell_box import create_cornell_box_scene
    >>>
    >>> scene, camera = create_cornell_box_scene(64, 48)
    >>> renderer = Renderer(scene, camera, StratifiedTentSampler(1), Film(64, 48))
    >>> renderer.render(callback=lambda done, total: print(f"{done}/{total}"))
    >>> renderer.film.store_image("image.bmp")
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, as_completed

from pathtracer.camera.pinhole import PinholeCamera
from pathtracer.core.film import Film
from pathtracer.core.integrator import PathIntegrator
from pathtracer.core.ray import Color, vec3
from pathtracer.core.sampler import Sampler
from pathtracer.scene.intersection import Scene

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (rows_completed, total_rows)
ProgressCallback = Callable[[int, int], None]


def _clamp(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else x


class Renderer:
    """Renders a scene through a camera into a film.

    Attributes:
        scene: The scene being rendered.
        camera: The camera generating primary rays.
        sampler: Prototype sampler; rows render with clones of it.
        film: The output film, matching the camera resolution.
        integrator: The radiance estimator.
        workers: Number of worker threads (None uses os.cpu_count()).
    """

    def __init__(
        self,
        scene: Scene,
        camera: PinholeCamera,
        sampler: Sampler,
        film: Film,
        integrator: PathIntegrator | None = None,
        workers: int | None = None,
    ) -> None:
        """Initialize the renderer.

        Raises:
            ValueError: If the film and camera resolutions differ, or
                workers is not positive.
        """
        if film.resolution != (camera.width, camera.height):
            raise ValueError(
                f"Film resolution {film.resolution} does not match camera "
                f"({camera.width}, {camera.height})"
            )
        if workers is not None and workers <= 0:
            raise ValueError(f"workers must be positive, got {workers}")

        self.scene = scene
        self.camera = camera
        self.sampler = sampler
        self.film = film
        self.integrator = integrator if integrator is not None else PathIntegrator(scene)
        self.workers = workers

    @property
    def width(self) -> int:
        return self.film.width

    @property
    def height(self) -> int:
        return self.film.height

    def render_pixel(self, x: int, y: int, sampler: Sampler) -> Color:
        """Estimate the color of one pixel.

        Averages the radiance of every camera sample the sampler produces for
        the pixel, then clamps the average to [0, 1].

        Args:
            x: Pixel column.
            y: Pixel row (0 = bottom).
            sampler: The sampler to draw samples from (owned by the caller).

        Returns:
            The clamped pixel color.
        """
        weight = 1.0 / sampler.samples_per_pixel
        li = vec3(0.0, 0.0, 0.0)

        sampler.start_pixel()
        while True:
            camera_sample = sampler.get_camera_sample((float(x), float(y)))
            ray = self.camera.generate_ray(camera_sample)
            li = li + self.integrator.radiance(ray, 0, sampler) * weight
            if not sampler.start_next_sample():
                break

        return vec3(_clamp(li.x), _clamp(li.y), _clamp(li.z))

    def render_row(self, y: int) -> int:
        """Render every pixel of row y into the film.

        Args:
            y: The row to render.

        Returns:
            The row index, for bookkeeping by the caller.
        """
        sampler = self.sampler.clone(stream=y)
        for x in range(self.width):
            self.film.add_color(x, y, self.render_pixel(x, y, sampler))
        return y

    def render(self, callback: ProgressCallback | None = None) -> Film:
        """Render the full image.

        Rows are submitted one at a time to a thread pool and complete in any
        order; the call blocks until all of them are done.

        Args:
            callback: Optional function called after each finished row with
                (rows_completed, total_rows).

        Returns:
            The film holding the rendered image.
        """
        max_workers = self.workers or os.cpu_count() or 1
        logger.info(
            "Rendering %dx%d at %d spp with %d workers (%r)",
            self.width,
            self.height,
            self.sampler.samples_per_pixel,
            max_workers,
            self.sampler,
        )
        logger.debug("Camera basis: %s", self.camera.get_camera_info())
        start_time = time.perf_counter()

        completed = 0
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(self.render_row, y) for y in range(self.height)]
            for future in as_completed(futures):
                future.result()
                completed += 1
                if callback is not None:
                    callback(completed, self.height)

        logger.info("Render finished in %.2fs", time.perf_counter() - start_time)
        return self.film

    def __repr__(self) -> str:
        return (
            f"Renderer(width={self.width}, height={self.height}, "
            f"samples={self.sampler.samples_per_pixel})"
        )
