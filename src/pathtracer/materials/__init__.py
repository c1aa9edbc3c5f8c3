"""Material scattering helpers.

Materials are selected by the MaterialType tag on each sphere and dispatched
in the integrator. Each module here provides the direction sampling and
weighting math for one material:

Components:
    lambertian: Ideal diffuse, cosine-weighted hemisphere sampling
    specular: Ideal mirror reflection
    dielectric: Glass, Snell refraction with Schlick Fresnel weights
"""

from .dielectric import (
    ETA_GLASS,
    ETA_VACUUM,
    DielectricScatter,
    reflection_probability,
    scatter_dielectric,
    schlick_fresnel,
)
from .lambertian import (
    cosine_hemisphere_pdf,
    lambertian_brdf,
    random_cosine_direction,
    sample_cosine_hemisphere,
)
from .specular import mirror_direction

__all__ = [
    "ETA_GLASS",
    "ETA_VACUUM",
    "DielectricScatter",
    "reflection_probability",
    "scatter_dielectric",
    "schlick_fresnel",
    "cosine_hemisphere_pdf",
    "lambertian_brdf",
    "random_cosine_direction",
    "sample_cosine_hemisphere",
    "mirror_direction",
]
