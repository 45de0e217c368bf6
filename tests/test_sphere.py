"""Unit tests for the Sphere primitive.

Tests cover:
- Head-on, oblique and tangent intersections
- Misses and interval rejection
- Inside hits and face orientation
- Moving spheres and their bounding boxes
- Degenerate radii
- Texture coordinates
"""

import math

import pytest

from conftest import assert_vec_close
from rayonetta.core import Interval, Ray, Vector3
from rayonetta.geometry import Sphere, sphere_uv

FORWARD = Interval(0.001, math.inf)


class TestSphereHit:
    """Tests for ray-sphere intersection."""

    def test_simple(self, gray):
        sphere = Sphere(Vector3(0.0, 0.0, 1.0), 0.5, gray)
        rec = sphere.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0)), FORWARD)
        assert rec is not None
        assert rec.t == pytest.approx(0.5)
        assert_vec_close(rec.p, Vector3(0.0, 0.0, 0.5), tol=1e-6)
        assert rec.material is gray

    def test_angle(self, gray):
        sphere = Sphere(Vector3(0.0, 0.0, 1.0), 0.5, gray)
        rec = sphere.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(-0.2, 0.0, 1.0)), FORWARD)
        t = 0.5105369462
        assert rec.t == pytest.approx(t, abs=1e-8)
        assert_vec_close(rec.p, Vector3(-0.2 * t, 0.0, t), tol=1e-6)

    def test_tangent(self, gray):
        sphere = Sphere(Vector3(0.0, 0.0, 1.0), 0.5, gray)
        rec = sphere.hit(Ray(Vector3(-0.5, 0.0, 0.0), Vector3(0.0, 0.0, 1.0)), FORWARD)
        assert rec is not None
        assert rec.t == 1.0
        assert_vec_close(rec.p, Vector3(-0.5, 0.0, 1.0), tol=1e-6)

    def test_miss(self, gray):
        sphere = Sphere(Vector3(0.0, 0.0, 1.0), 0.5, gray)
        assert sphere.hit(Ray(Vector3(-1.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0)), FORWARD) is None

    def test_outside_interval(self, gray):
        sphere = Sphere(Vector3(0.0, 0.0, 1.0), 0.5, gray)
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0))
        assert sphere.hit(ray, Interval(0.001, 0.1)) is None

    def test_distance_to_center(self, gray, rng):
        """Aimed at the center from outside, t is the distance minus the radius."""
        for _ in range(200):
            center = Vector3.random(rng, -10.0, 10.0)
            radius = rng.uniform(0.1, 3.0)
            sphere = Sphere(center, radius, gray)
            origin = center + Vector3.random(rng, -1.0, 1.0).normalize() * rng.uniform(radius + 0.5, 20.0)
            direction = (center - origin).normalize()

            rec = sphere.hit(Ray(origin, direction), FORWARD)
            assert rec is not None
            assert rec.t == pytest.approx((origin - center).length() - radius, abs=1e-6)
            assert (rec.p - center).length() == pytest.approx(radius, abs=1e-6)

    def test_front_face_and_normal(self, gray):
        sphere = Sphere(Vector3(0.0, 0.0, -2.0), 1.0, gray)
        rec = sphere.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)), FORWARD)
        assert rec.front_face
        assert_vec_close(rec.normal, Vector3(0.0, 0.0, 1.0))

    def test_inside_hit_flips_normal(self, gray):
        """From inside, the far wall is hit and the normal faces the ray."""
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 2.0, gray)
        rec = sphere.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0)), FORWARD)
        assert rec.t == pytest.approx(2.0)
        assert not rec.front_face
        assert_vec_close(rec.normal, Vector3(-1.0, 0.0, 0.0))

    @pytest.mark.parametrize("radius", [0.0, -1.0])
    def test_degenerate_radius_never_hits(self, gray, radius):
        sphere = Sphere(Vector3(0.0, 0.0, -1.0), radius, gray)
        assert sphere.radius == 0.0
        assert sphere.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)), FORWARD) is None


class TestMovingSphere:
    """Tests for spheres in linear motion."""

    def test_center_at(self, gray):
        sphere = Sphere.moving(Vector3(0.0, 0.0, 0.0), Vector3(2.0, 0.0, 0.0), 1.0, gray)
        assert sphere.center_at(0.0) == Vector3(0.0, 0.0, 0.0)
        assert sphere.center_at(0.5) == Vector3(1.0, 0.0, 0.0)
        assert sphere.center_at(1.0) == Vector3(2.0, 0.0, 0.0)

    def test_static_center_ignores_time(self, gray):
        sphere = Sphere(Vector3(1.0, 2.0, 3.0), 1.0, gray)
        assert sphere.center_at(0.7) == Vector3(1.0, 2.0, 3.0)

    def test_hit_uses_ray_time(self, gray):
        sphere = Sphere.moving(Vector3(0.0, 0.0, -5.0), Vector3(0.0, 10.0, -5.0), 1.0, gray)
        direction = Vector3(0.0, 0.0, -1.0)
        assert sphere.hit(Ray(Vector3(0.0, 0.0, 0.0), direction, 0.0), FORWARD) is not None
        assert sphere.hit(Ray(Vector3(0.0, 0.0, 0.0), direction, 1.0), FORWARD) is None
        rec = sphere.hit(Ray(Vector3(0.0, 10.0, 0.0), direction, 1.0), FORWARD)
        assert rec.t == pytest.approx(4.0)

    def test_box_covers_both_ends(self, gray):
        sphere = Sphere.moving(Vector3(0.0, 0.0, 0.0), Vector3(5.0, 0.0, 0.0), 1.0, gray)
        box = sphere.bounding_box()
        assert box.x == Interval(-1.0, 6.0)
        assert box.y == Interval(-1.0, 1.0)


class TestSphereUV:
    """Tests for spherical texture coordinates."""

    @pytest.mark.parametrize("point, expected", [
        (Vector3(1.0, 0.0, 0.0), (0.5, 0.5)),
        (Vector3(0.0, 1.0, 0.0), (0.5, 1.0)),
        (Vector3(0.0, -1.0, 0.0), (0.5, 0.0)),
        (Vector3(-1.0, 0.0, 0.0), (0.0, 0.5)),
        (Vector3(0.0, 0.0, 1.0), (0.25, 0.5)),
        (Vector3(0.0, 0.0, -1.0), (0.75, 0.5)),
    ])
    def test_reference_points(self, point, expected):
        u, v = sphere_uv(point)
        assert u == pytest.approx(expected[0])
        assert v == pytest.approx(expected[1])

    def test_hit_record_carries_uv(self, gray):
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 2.0, gray)
        rec = sphere.hit(Ray(Vector3(5.0, 0.0, 0.0), Vector3(-1.0, 0.0, 0.0)), FORWARD)
        assert rec.u == pytest.approx(0.5)
        assert rec.v == pytest.approx(0.5)
