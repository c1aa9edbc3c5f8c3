"""CPU Monte Carlo path tracer for a sphere-only Cornell box.

This package renders a scene of implicit spheres with diffuse, mirror and
glass materials through a pinhole camera, estimating radiance with a
recursive, unbiased path tracer, and writes the result as a bitmap.

Subpackages:
    core: Vectors and rays, random numbers, samplers, the integrator, the
        film and the scanline-parallel renderer
    geometry: The sphere primitive and its intersection routine
    materials: Diffuse, specular and dielectric scattering helpers
    scene: Scene intersection and the Cornell box configuration
    camera: Pinhole camera ray generation
    preview: Image encoding and export
"""

__version__ = "0.1.0"
