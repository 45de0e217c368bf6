# materials/isotropic.py
import random
from typing import Tuple, Union
from rayonetta.core.ray import Ray
from rayonetta.core.utils import random_unit_vector
from rayonetta.core.vector import Color, Vector3
from rayonetta.materials.material import Material
from rayonetta.materials.textures import Texture, as_texture


class Isotropic(Material):
    """Phase function of a participating medium: scatters uniformly in all directions."""
    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec, rng=random) -> Tuple[Color, Ray]:
        scattered = Ray(rec.p, random_unit_vector(rng), ray_in.time)
        return self.texture.value(rec.u, rec.v, rec.p), scattered
