# materials/material.py
import random
from typing import TYPE_CHECKING, Optional, Tuple
from rayonetta.core.ray import Ray
from rayonetta.core.vector import Color, Vector3

if TYPE_CHECKING:
    from rayonetta.geometry.hittable import HitRecord

BLACK = Color(0.0, 0.0, 0.0)


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    """
    def scatter(self, ray_in: Ray, rec: "HitRecord", rng=random) -> Optional[Tuple[Color, Ray]]:
        """
        Computes the attenuation and the scattered ray.
        Returns a tuple (attenuation, scattered_ray), or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        """
        Light given off at the hit point. Only light sources emit.
        """
        return BLACK
