# materials/metal.py
import random
from typing import Optional, Tuple, Union
from rayonetta.core.ray import Ray
from rayonetta.core.utils import random_unit_vector, reflect
from rayonetta.core.vector import Color, Vector3
from rayonetta.materials.material import Material
from rayonetta.materials.textures import Texture, as_texture


class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    `fuzz` in [0, 1] perturbs the mirror direction; 0 is a perfect mirror.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        self.texture = as_texture(albedo)
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec, rng=random) -> Optional[Tuple[Color, Ray]]:
        reflected = reflect(ray_in.direction, rec.normal).normalize()
        if self.fuzz > 0.0:
            reflected = reflected + random_unit_vector(rng) * self.fuzz
        scattered = Ray(rec.p, reflected, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return self.texture.value(rec.u, rec.v, rec.p), scattered

        return None  # Absorb the ray if it does not scatter forward
