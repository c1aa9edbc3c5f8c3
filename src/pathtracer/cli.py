"""Render the Cornell box scene from the command line.

Usage:
    pathtracer [SAMPLES] [options]
    python -m pathtracer [SAMPLES] [options]

Arguments:
    SAMPLES             Total samples per pixel (default: 40). Invalid or
                        non-positive values fall back to the default.

Options:
    --output OUTPUT     Output file path (default: image.bmp)
    --seed SEED         Random seed (default: 1234)
    --workers N         Render threads (default: one per CPU)
    --sampler KIND      "tent" (2x2 stratified, default) or "random"
    --quiet             Suppress progress output

Example:
    pathtracer 100 --output cornell.bmp
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from pathtracer.config import (
    DEFAULT_OUTPUT,
    RenderSettings,
    parse_sample_budget,
)
from pathtracer.core.film import Film
from pathtracer.core.renderer import Renderer
from pathtracer.core.rng import DEFAULT_SEED
from pathtracer.core.sampler import SAMPLER_TYPES
from pathtracer.scene.cornell_box import create_cornell_box_scene

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render the Cornell box scene with a Monte Carlo path tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "samples",
        nargs="?",
        default=None,
        help="Total samples per pixel (default: 40)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=DEFAULT_OUTPUT,
        help=f"Output file path (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help=f"Random seed (default: {DEFAULT_SEED})",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of render threads (default: one per CPU)",
    )
    parser.add_argument(
        "--sampler",
        choices=sorted(SAMPLER_TYPES),
        default="tent",
        help="Pixel sampling strategy (default: tent)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    """Build render settings from parsed arguments."""
    return RenderSettings(
        sample_budget=parse_sample_budget(args.samples),
        seed=args.seed,
        sampler=args.sampler,
        workers=args.workers,
        output=args.output,
    )


def render_scene(settings: RenderSettings, quiet: bool = False) -> Path:
    """Render the Cornell box scene and save it.

    Args:
        settings: Resolution, sampling and output configuration.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    scene, camera = create_cornell_box_scene(settings.width, settings.height)
    sampler = settings.create_sampler()
    film = Film(settings.width, settings.height)
    renderer = Renderer(scene, camera, sampler, film, workers=settings.workers)

    start_time = time.time()

    def progress_callback(current: int, total: int) -> None:
        if not quiet:
            print(
                f"\rRendering ({sampler.samples_per_pixel} spp) {100.0 * current / total:5.2f}%",
                end="",
                file=sys.stderr,
                flush=True,
            )

    renderer.render(callback=progress_callback)

    if not quiet:
        print(file=sys.stderr)  # Newline after progress

    output_file = film.store_image(settings.output)

    logger.info("Saved to: %s", output_file.absolute())
    logger.info("Total time: %.2fs", time.time() - start_time)
    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = settings_from_args(args)
        render_scene(settings, quiet=args.quiet)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
