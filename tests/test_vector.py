"""Unit tests for vectors, rays and the sampling helpers.

Tests cover:
- Vector arithmetic, indexing and normalization
- Reflection and refraction
- Random sampling domains
"""

import math

import pytest

from conftest import assert_vec_close
from rayonetta.core import (
    Ray,
    Vector3,
    degrees_to_radians,
    random_in_unit_disk,
    random_in_unit_sphere,
    random_on_hemisphere,
    random_unit_vector,
    reflect,
    refract,
    schlick,
)


class TestVectorArithmetic:
    """Tests for basic Vector3 operations."""

    def test_add_sub_neg(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(4.0, 5.0, 6.0)
        assert a + b == Vector3(5.0, 7.0, 9.0)
        assert b - a == Vector3(3.0, 3.0, 3.0)
        assert -a == Vector3(-1.0, -2.0, -3.0)

    def test_scalar_and_elementwise_multiply(self):
        a = Vector3(1.0, 2.0, 3.0)
        assert a * 2 == Vector3(2.0, 4.0, 6.0)
        assert 2 * a == Vector3(2.0, 4.0, 6.0)
        assert a * Vector3(2.0, 0.5, -1.0) == Vector3(2.0, 1.0, -3.0)
        assert a / 2 == Vector3(0.5, 1.0, 1.5)

    def test_dot_and_cross(self):
        x = Vector3(1.0, 0.0, 0.0)
        y = Vector3(0.0, 1.0, 0.0)
        assert x.dot(y) == 0.0
        assert x.cross(y) == Vector3(0.0, 0.0, 1.0)
        assert y.cross(x) == Vector3(0.0, 0.0, -1.0)

    def test_normalize(self):
        v = Vector3(3.0, 0.0, 4.0).normalize()
        assert v.length() == pytest.approx(1.0)
        assert_vec_close(v, Vector3(0.6, 0.0, 0.8))

    def test_normalize_zero_vector(self):
        """The zero vector normalizes to itself instead of dividing by zero."""
        assert Vector3(0.0, 0.0, 0.0).normalize() == Vector3(0.0, 0.0, 0.0)

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0.0).near_zero()
        assert not Vector3(1e-9, 1e-3, 0.0).near_zero()

    def test_indexing(self):
        v = Vector3(1.0, 2.0, 3.0)
        assert (v[0], v[1], v[2]) == (1.0, 2.0, 3.0)
        assert list(v) == [1.0, 2.0, 3.0]

    @pytest.mark.parametrize("axis", [-1, 3, 7])
    def test_indexing_out_of_range(self, axis):
        with pytest.raises(IndexError):
            Vector3(1.0, 2.0, 3.0)[axis]

    def test_random_range(self, rng):
        for _ in range(100):
            v = Vector3.random(rng, -2.0, 2.0)
            assert all(-2.0 <= c <= 2.0 for c in v)


class TestRay:
    """Tests for ray evaluation."""

    def test_at(self):
        r = Ray(Vector3(1.0, 1.0, 1.0), Vector3(0.0, 2.0, 0.0))
        assert r.at(0.5) == Vector3(1.0, 2.0, 1.0)

    def test_default_time(self):
        r = Ray(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0))
        assert r.time == 0.0
        assert Ray(r.origin, r.direction, 0.25).time == 0.25


class TestReflectRefract:
    """Tests for reflection and refraction directions."""

    def test_reflect_preserves_length(self, rng):
        """Reflecting a unit vector about a unit normal keeps it unit length."""
        for _ in range(200):
            v = random_unit_vector(rng)
            n = random_unit_vector(rng)
            assert reflect(v, n).length() == pytest.approx(1.0)

    def test_reflect_mirrors_normal_component(self):
        v = Vector3(1.0, -1.0, 0.0)
        n = Vector3(0.0, 1.0, 0.0)
        assert reflect(v, n) == Vector3(1.0, 1.0, 0.0)

    def test_refract_unit_ratio_is_identity(self, rng):
        """With equal indices the ray passes straight through."""
        for _ in range(200):
            uv = random_unit_vector(rng)
            n = random_unit_vector(rng)
            if uv.dot(n) > 0:
                n = -n
            assert_vec_close(refract(uv, n, 1.0), uv, tol=1e-6)

    def test_refract_bends_towards_normal(self):
        """Entering a denser medium the angle to the normal shrinks."""
        uv = Vector3(1.0, -1.0, 0.0).normalize()
        n = Vector3(0.0, 1.0, 0.0)
        out = refract(uv, n, 1.0 / 1.5)
        assert out.length() == pytest.approx(1.0)
        assert abs(out.x) < abs(uv.x)
        # Snell: sin(theta_t) = sin(theta_i) / 1.5
        assert out.x == pytest.approx(uv.x / 1.5)

    def test_schlick_bounds(self):
        assert schlick(1.0, 1.5) == pytest.approx(0.04)
        assert schlick(0.0, 1.5) == pytest.approx(1.0)


class TestSampling:
    """Tests for the random sampling helpers."""

    def test_unit_sphere(self, rng):
        for _ in range(200):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_unit_vector(self, rng):
        for _ in range(200):
            assert random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_unit_disk(self, rng):
        for _ in range(200):
            p = random_in_unit_disk(rng)
            assert p.z == 0.0
            assert p.length_squared() < 1.0

    def test_hemisphere(self, rng):
        n = Vector3(0.0, 0.0, 1.0)
        for _ in range(200):
            assert random_on_hemisphere(n, rng).dot(n) >= 0.0

    def test_same_seed_same_samples(self):
        import random

        a = random.Random(7)
        b = random.Random(7)
        assert [random_unit_vector(a) for _ in range(5)] == [random_unit_vector(b) for _ in range(5)]

    def test_degrees_to_radians(self):
        assert degrees_to_radians(180.0) == pytest.approx(math.pi)
