"""Dielectric (glass) material implementation.

Models a smooth interface between vacuum and glass that both reflects and
transmits light.

Key physics:
    - Snell's law for the transmitted direction: eta_i sin(theta_i) = eta_t sin(theta_t)
    - Schlick's approximation for the Fresnel reflectance
    - Total internal reflection when cos^2(theta_t) would be negative

The integrator combines the two lobes either deterministically (both
branches weighted by Re and Tr) or by choosing one branch with probability
reflection_probability(Re) and reweighting it.

Example:
    >>> lobes = scatter_dielectric(ray_direction, normal, shading_normal)
    >>> if lobes.total_internal_reflection:
    ...     ...  # follow lobes.reflect_direction only
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pathtracer.core.ray import Vector3, reflect

# Index of refraction outside the sphere (vacuum)
ETA_VACUUM = 1.0

# Index of refraction of the glass
ETA_GLASS = 1.5


@dataclass(frozen=True, slots=True)
class DielectricScatter:
    """Reflected and transmitted lobes at a dielectric interface.

    Attributes:
        reflect_direction: Mirror reflection direction.
        transmit_direction: Refracted direction, None under total internal
            reflection.
        reflectance: Fresnel reflectance Re (1 under total internal reflection).
        transmittance: 1 - Re (0 under total internal reflection).
        entering: True if the ray goes from vacuum into the glass.
        cos_theta_t2: Squared cosine of the transmission angle; negative
            values mean total internal reflection.
    """

    reflect_direction: Vector3
    transmit_direction: Vector3 | None
    reflectance: float
    transmittance: float
    entering: bool
    cos_theta_t2: float

    @property
    def total_internal_reflection(self) -> bool:
        return self.transmit_direction is None


def schlick_fresnel(cosine: float, eta_i: float = ETA_VACUUM, eta_t: float = ETA_GLASS) -> float:
    """Compute Fresnel reflectance using Schlick's approximation.

    Args:
        cosine: Cosine of the angle on the vacuum side of the interface.
        eta_i: Index of refraction of the outer medium.
        eta_t: Index of refraction of the inner medium.

    Returns:
        R0 + (1 - R0)(1 - cosine)^5 with R0 = ((eta_t - eta_i) / (eta_t + eta_i))^2.
    """
    a = eta_t - eta_i
    b = eta_t + eta_i
    r0 = a * a / (b * b)
    c = 1.0 - cosine
    return r0 + (1.0 - r0) * c * c * c * c * c


def reflection_probability(reflectance: float) -> float:
    """Probability of following the reflected branch when choosing one.

    Biased toward reflection: P = 0.25 + 0.5 Re.
    """
    return 0.25 + 0.5 * reflectance


def scatter_dielectric(
    incident: Vector3,
    normal: Vector3,
    shading_normal: Vector3,
    eta_i: float = ETA_VACUUM,
    eta_t: float = ETA_GLASS,
) -> DielectricScatter:
    """Compute both scattering lobes of a dielectric interface.

    Args:
        incident: The incoming ray direction (unit length).
        normal: The outward geometric normal of the sphere.
        shading_normal: The normal flipped to face against the incoming ray.
        eta_i: Index of refraction outside the sphere.
        eta_t: Index of refraction inside the sphere.

    Returns:
        A DielectricScatter describing the reflected and transmitted lobes.
    """
    entering = normal.dot(shading_normal) > 0.0
    eta = eta_i / eta_t if entering else eta_t / eta_i

    reflect_direction = reflect(incident, normal)

    cos_theta_i = incident.dot(shading_normal)
    cos_theta_t2 = 1.0 - eta * eta * (1.0 - cos_theta_i * cos_theta_i)
    if cos_theta_t2 < 0.0:
        return DielectricScatter(
            reflect_direction=reflect_direction,
            transmit_direction=None,
            reflectance=1.0,
            transmittance=0.0,
            entering=entering,
            cos_theta_t2=cos_theta_t2,
        )

    sign = 1.0 if entering else -1.0
    transmit_direction = (
        incident * eta - normal * (sign * (cos_theta_i * eta + math.sqrt(cos_theta_t2)))
    ).normalize()

    # Schlick uses the cosine on the vacuum side of the interface
    cosine = -cos_theta_i if entering else transmit_direction.dot(normal)
    reflectance = schlick_fresnel(cosine, eta_i, eta_t)

    return DielectricScatter(
        reflect_direction=reflect_direction,
        transmit_direction=transmit_direction,
        reflectance=reflectance,
        transmittance=1.0 - reflectance,
        entering=entering,
        cos_theta_t2=cos_theta_t2,
    )
