"""Path tracing integrator for Monte Carlo light transport.

This module implements the recursive radiance estimator. Given a ray it
returns an unbiased estimate of the radiance arriving along that ray by
adding the emission of the hit surface to a recursively estimated incident
radiance, weighted by the surface's scattering behavior.

Key features:
    - Material dispatch on the sphere's material tag (diffuse, specular,
      refract)
    - Cosine-weighted importance sampling for diffuse surfaces
    - Fresnel-weighted reflection/transmission for dielectrics, evaluating
      both branches near the camera and choosing one further down the path
    - Russian roulette termination after ROULETTE_DEPTH bounces, with a hard
      MAX_DEPTH recursion guard

Example:
    >>> from pathtracer.core.integrator import PathIntegrator
    >>> from pathtracer.core.sampler import RandomSampler
    >>> from pathtracer.scene.cornell_box import create_cornell_box_scene
    >>>
    >>> scene, camera = create_cornell_box_scene()
    >>> integrator = PathIntegrator(scene)
    >>> sampler = RandomSampler(samples_per_pixel=1)
    >>> color = integrator.radiance(ray, 0, sampler)
"""

from __future__ import annotations

from pathtracer.core.ray import Color, Ray, Vector3, make_ray, ray_at, vec3
from pathtracer.core.sampler import Sampler
from pathtracer.geometry.sphere import MaterialType
from pathtracer.materials.dielectric import reflection_probability, scatter_dielectric
from pathtracer.materials.lambertian import lambertian_brdf, sample_cosine_hemisphere
from pathtracer.materials.specular import mirror_direction
from pathtracer.scene.intersection import Scene

# =============================================================================
# Rendering Constants
# =============================================================================

# Paths deeper than this return only the emission of the hit surface
MAX_DEPTH = 100

# Russian roulette applies once the (incremented) depth exceeds this
ROULETTE_DEPTH = 5

# Dielectric hits at or below this depth evaluate both reflection and
# transmission instead of choosing one
DIELECTRIC_SPLIT_DEPTH = 2

BLACK = vec3(0.0, 0.0, 0.0)


class PathIntegrator:
    """Recursive radiance estimator over a scene of spheres.

    The integrator holds no per-path state, so a single instance can be used
    by every render worker as long as each worker passes its own sampler.

    Attributes:
        scene: The scene to trace rays against.
        max_depth: Recursion guard; deeper hits return their emission only.
        roulette_depth: Depth after which Russian roulette may end a path.
        russian_roulette: Whether Russian roulette is applied at all.
    """

    def __init__(
        self,
        scene: Scene,
        *,
        max_depth: int = MAX_DEPTH,
        roulette_depth: int = ROULETTE_DEPTH,
        russian_roulette: bool = True,
    ) -> None:
        self.scene = scene
        self.max_depth = max_depth
        self.roulette_depth = roulette_depth
        self.russian_roulette = russian_roulette

    def radiance(self, ray: Ray, depth: int, sampler: Sampler) -> Color:
        """Estimate the radiance arriving along a ray.

        Args:
            ray: The ray to trace (unit direction).
            depth: Number of bounces already taken; 0 for camera rays.
            sampler: Source of random numbers for this path.

        Returns:
            The estimated RGB radiance. Every channel is non-negative.
        """
        record = self.scene.intersect(ray)
        if not record.hit:
            return BLACK

        sphere = record.sphere
        emission = sphere.emission

        if depth > self.max_depth:
            return emission

        position = ray_at(ray, record.t)
        normal = (position - sphere.center).normalize()
        # Shading normal faces against the incoming ray
        shading_normal = normal if normal.dot(ray.direction) < 0.0 else -normal

        f = sphere.reflectance

        depth += 1
        if self.russian_roulette and depth > self.roulette_depth:
            continue_probability = f.max_component()
            if sampler.get_1d() < continue_probability:
                f = f * (1.0 / continue_probability)
            else:
                return emission

        material = sphere.material
        if material == MaterialType.DIFFUSE:
            return self._diffuse(position, shading_normal, emission, f, depth, sampler)
        if material == MaterialType.SPECULAR:
            direction = mirror_direction(ray.direction, normal)
            return emission + f * self.radiance(make_ray(position, direction), depth, sampler)
        if material == MaterialType.REFRACT:
            return self._dielectric(ray, position, normal, shading_normal, emission, f, depth, sampler)

        raise ValueError(f"Unknown material type: {material!r}")

    # =========================================================================
    # Material Scattering
    # =========================================================================

    def _diffuse(
        self,
        position: Vector3,
        shading_normal: Vector3,
        emission: Color,
        f: Color,
        depth: int,
        sampler: Sampler,
    ) -> Color:
        # Keep the cosine and pdf as separate factors; they cancel to f * Li
        direction, pdf = sample_cosine_hemisphere(shading_normal, sampler.get_1d(), sampler.get_1d())
        brdf = lambertian_brdf(f)
        abs_cos_theta = abs(shading_normal.dot(direction))

        incident = self.radiance(make_ray(position, direction), depth, sampler)
        return emission + brdf * incident * (abs_cos_theta / pdf)

    def _dielectric(
        self,
        ray: Ray,
        position: Vector3,
        normal: Vector3,
        shading_normal: Vector3,
        emission: Color,
        f: Color,
        depth: int,
        sampler: Sampler,
    ) -> Color:
        lobes = scatter_dielectric(ray.direction, normal, shading_normal)
        reflect_ray = make_ray(position, lobes.reflect_direction)

        if lobes.total_internal_reflection:
            return emission + f * self.radiance(reflect_ray, depth, sampler)

        transmit_ray = make_ray(position, lobes.transmit_direction)
        reflectance = lobes.reflectance
        transmittance = lobes.transmittance

        if depth > DIELECTRIC_SPLIT_DEPTH:
            # Choose one branch and reweight by its selection probability
            p = reflection_probability(reflectance)
            if sampler.get_1d() < p:
                incident = self.radiance(reflect_ray, depth, sampler) * (reflectance / p)
            else:
                incident = self.radiance(transmit_ray, depth, sampler) * (transmittance / (1.0 - p))
        else:
            incident = (
                self.radiance(reflect_ray, depth, sampler) * reflectance
                + self.radiance(transmit_ray, depth, sampler) * transmittance
            )

        return emission + f * incident
