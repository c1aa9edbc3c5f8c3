"""Unit tests for scene-level intersection."""

import math

import pytest

from pathtracer.core.ray import make_ray, vec3
from pathtracer.geometry.sphere import Sphere
from pathtracer.scene.intersection import MISS_DISTANCE, Scene, SceneHitRecord


def sphere_at(z, radius=1.0):
    return Sphere(radius, vec3(0.0, 0.0, z), vec3(), vec3(0.5, 0.5, 0.5))


class TestScene:
    """Tests for the Scene container."""

    def test_sequence_protocol(self):
        spheres = [sphere_at(-5.0), sphere_at(-10.0)]
        scene = Scene(spheres)
        assert len(scene) == 2
        assert list(scene) == spheres
        assert scene[1] is spheres[1]
        assert scene.spheres == tuple(spheres)
        assert repr(scene) == "Scene(spheres=2)"

    def test_scene_does_not_alias_input_list(self):
        spheres = [sphere_at(-5.0)]
        scene = Scene(spheres)
        spheres.append(sphere_at(-10.0))
        assert len(scene) == 1


class TestSceneIntersect:
    """Tests for nearest-hit queries."""

    def test_nearest_hit_wins(self):
        far = sphere_at(-10.0)
        near = sphere_at(-5.0)
        scene = Scene([far, near])
        record = scene.intersect(make_ray(vec3(), vec3(0.0, 0.0, -1.0)))
        assert record.hit
        assert record.sphere is near
        assert record.sphere_index == 1
        assert record.t == pytest.approx(4.0)

    def test_nested_spheres_hit_inner_first(self):
        outer = sphere_at(0.0, radius=10.0)
        inner = sphere_at(-5.0, radius=1.0)
        scene = Scene([outer, inner])
        record = scene.intersect(make_ray(vec3(), vec3(0.0, 0.0, -1.0)))
        assert record.sphere is inner

    def test_miss_record(self):
        scene = Scene([sphere_at(-5.0)])
        record = scene.intersect(make_ray(vec3(), vec3(0.0, 0.0, 1.0)))
        assert not record.hit
        assert record.t == MISS_DISTANCE
        assert math.isinf(record.t)
        assert record.sphere_index == -1
        assert record.sphere is None

    def test_empty_scene_misses(self):
        record = Scene([]).intersect(make_ray(vec3(), vec3(1.0, 0.0, 0.0)))
        assert isinstance(record, SceneHitRecord)
        assert not record.hit

    def test_cornell_center_ray_hits_back_wall(self, cornell_box):
        from pathtracer.core.sampler import CameraSample

        scene, camera = cornell_box
        ray = camera.generate_ray(CameraSample((512.0, 384.0)))
        record = scene.intersect(ray)
        assert record.sphere_index == 2
        hit_z = ray.origin.z + ray.direction.z * record.t
        assert hit_z == pytest.approx(0.0, abs=1e-2)
