"""Pytest configuration for path tracer tests.

This module provides shared fixtures: the Cornell box scene at full and at
reduced resolution, small scenes for analytic checks, and samplers with
fixed seeds so every test is reproducible.
"""

import pytest

from pathtracer.core.ray import vec3
from pathtracer.core.sampler import RandomSampler, Sampler, StratifiedTentSampler
from pathtracer.geometry.sphere import MaterialType, Sphere
from pathtracer.scene.cornell_box import create_cornell_box_scene
from pathtracer.scene.intersection import Scene

TEST_SEED = 42


class ScriptedSampler(Sampler):
    """Sampler that returns preset 1D values, for exercising exact branches.

    Raises AssertionError if the integrator asks for more numbers than were
    scripted, which lets tests assert that a code path is deterministic.
    """

    def __init__(self, values=()):
        super().__init__(1, TEST_SEED)
        self.values = list(values)
        self.calls = 0

    def get_1d(self) -> float:
        self.calls += 1
        assert self.values, "integrator drew an unexpected random number"
        return self.values.pop(0)

    def get_camera_sample(self, p_film):
        raise NotImplementedError


@pytest.fixture
def cornell_box():
    """Full-resolution Cornell box scene and camera."""
    return create_cornell_box_scene()


@pytest.fixture
def small_cornell_box():
    """Cornell box at a reduced 64x48 resolution with the same framing."""
    return create_cornell_box_scene(64, 48)


@pytest.fixture
def random_sampler():
    return RandomSampler(1, TEST_SEED)


@pytest.fixture
def tent_sampler():
    return StratifiedTentSampler(1, TEST_SEED)


@pytest.fixture
def emissive_room():
    """A closed diffuse sphere that emits 1 and reflects half of the light.

    A camera inside sees L = E + a L, so the exact radiance is E / (1 - a) = 2
    in every direction.
    """
    room = Sphere(10.0, vec3(0.0, 0.0, 0.0), vec3(1.0, 1.0, 1.0), vec3(0.5, 0.5, 0.5))
    return Scene([room])


@pytest.fixture
def scripted_sampler():
    return ScriptedSampler


@pytest.fixture
def mirror_scene():
    """A mirror ball in front of the origin, inside an emitting sky that reflects nothing."""
    mirror = Sphere(
        1.0, vec3(0.0, 0.0, -5.0), vec3(), vec3(0.9, 0.9, 0.9), MaterialType.SPECULAR
    )
    sky = Sphere(100.0, vec3(0.0, 0.0, 0.0), vec3(1.0, 1.0, 1.0), vec3())
    return Scene([mirror, sky])


@pytest.fixture
def glass_in_sky():
    """Factory for a unit glass ball at the origin inside an emitting sky.

    The glass transmits everything (f = 1) and the sky emits 1 but reflects
    nothing, so every escaping path carries exactly the sky emission.
    """

    def build(glass_emission=0.0):
        glass = Sphere(
            1.0,
            vec3(0.0, 0.0, 0.0),
            vec3(glass_emission, glass_emission, glass_emission),
            vec3(1.0, 1.0, 1.0),
            MaterialType.REFRACT,
        )
        sky = Sphere(100.0, vec3(0.0, 0.0, 0.0), vec3(1.0, 1.0, 1.0), vec3())
        return Scene([glass, sky])

    return build
