# materials/lambertian.py
import random
from typing import Tuple, Union
from rayonetta.core.ray import Ray
from rayonetta.core.utils import random_unit_vector
from rayonetta.core.vector import Color, Vector3
from rayonetta.materials.material import Material
from rayonetta.materials.textures import Texture, as_texture


class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        # Store either a solid color or a texture.
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec, rng=random) -> Tuple[Color, Ray]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (attenuation, scattered_ray).
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return attenuation, scattered
