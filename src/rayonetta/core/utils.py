# core/utils.py
import math
import random
from rayonetta.core.vector import Vector3


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def random_in_unit_sphere(rng=random) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if 1e-160 < p.dot(p) < 1.0:
            return p


def random_unit_vector(rng=random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()


def random_on_hemisphere(normal: Vector3, rng=random) -> Vector3:
    on_unit_sphere = random_unit_vector(rng)
    if on_unit_sphere.dot(normal) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere


def random_in_unit_disk(rng=random) -> Vector3:
    """Generate random point in unit disk for DOF."""
    while True:
        p = Vector3(
            rng.uniform(-1, 1),
            rng.uniform(-1, 1),
            0.0
        )
        if p.dot(p) < 1:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * (2 * v.dot(n))


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Bends the unit direction uv through a surface with normal n according to
    Snell's law. The caller handles total internal reflection.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel


def schlick(cosine: float, refraction_index: float) -> float:
    """Schlick's approximation of the Fresnel reflectance."""
    r0 = (1.0 - refraction_index) / (1.0 + refraction_index)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)
