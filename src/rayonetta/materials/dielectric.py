# materials/dielectric.py
import math
import random
from typing import Tuple
from rayonetta.core.ray import Ray
from rayonetta.core.utils import reflect, refract, schlick
from rayonetta.core.vector import Color
from rayonetta.materials.material import Material

WHITE = Color(1.0, 1.0, 1.0)


class Dielectric(Material):
    """
    Clear refractive material such as glass or water. `refraction_index` is
    relative to the surrounding medium; values below 1 model bubbles.
    """
    def __init__(self, refraction_index: float):
        self.refraction_index = refraction_index

    def scatter(self, ray_in: Ray, rec, rng=random) -> Tuple[Color, Ray]:
        # Determine if we're entering or exiting the material
        ri = 1.0 / self.refraction_index if rec.front_face else self.refraction_index

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = ri * sin_theta > 1.0
        if cannot_refract or schlick(cos_theta, ri) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)

        # Glass doesn't absorb light
        return WHITE, Ray(rec.p, direction, ray_in.time)
