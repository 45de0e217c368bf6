"""Shared fixtures for the path tracer tests.

Every test that draws random numbers gets its own seeded generator, so
results do not depend on test order.
"""

import random

import pytest

from rayonetta.core.vector import Color
from rayonetta.materials import Dielectric, DiffuseLight, Lambertian, Metal


@pytest.fixture
def rng():
    """A seeded random source."""
    return random.Random(1234)


@pytest.fixture
def gray():
    """Mid-gray diffuse material."""
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def mirror():
    """Perfect mirror."""
    return Metal(Color(0.8, 0.8, 0.8), 0.0)


@pytest.fixture
def glass():
    return Dielectric(1.5)


@pytest.fixture
def lamp():
    """White light source of unit radiance."""
    return DiffuseLight(Color(1.0, 1.0, 1.0))


def assert_vec_close(a, b, tol=1e-9):
    """Component-wise comparison of two vectors."""
    for x, y in zip(a, b):
        assert x == pytest.approx(y, abs=tol)
