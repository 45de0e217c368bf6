# materials/diffuse_light.py
import random
from typing import Union
from rayonetta.core.ray import Ray
from rayonetta.core.vector import Color, Vector3
from rayonetta.materials.material import Material
from rayonetta.materials.textures import Texture, as_texture


class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    The texture can be used to create patterns in the emitted light.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec, rng=random) -> None:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        return self.texture.value(u, v, p)
