# geometry/medium.py
import math
import random
from typing import Optional, Union
from rayonetta.core.aabb import AABB
from rayonetta.core.interval import Interval
from rayonetta.core.ray import Ray
from rayonetta.core.vector import Vector3
from rayonetta.geometry.hittable import Hittable, HitRecord
from rayonetta.materials.isotropic import Isotropic
from rayonetta.materials.textures import Texture

# Gap past the entry point before looking for the exit, so the entry surface
# is not found twice.
EXIT_EPSILON = 0.0001


class ConstantMedium(Hittable):
    """
    Fog or smoke of uniform density filling a closed boundary.

    A ray crossing the boundary scatters at a random depth drawn from the
    Beer-Lambert law, or passes straight through when that depth lies beyond
    the exit point. The scattering itself is isotropic.
    """
    def __init__(self, boundary: Hittable, density: float, albedo: Union[Vector3, Texture]):
        if density <= 0:
            raise ValueError(f"Medium density must be positive, got {density}")
        self.boundary = boundary
        self.density = density
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, ray_t: Interval, rng=random) -> Optional[HitRecord]:
        rec1 = self.boundary.hit(ray, Interval.UNIVERSE, rng)
        if rec1 is None:
            return None

        rec2 = self.boundary.hit(ray, Interval(rec1.t + EXIT_EPSILON, math.inf), rng)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, ray_t.min)
        t_exit = min(rec2.t, ray_t.max)
        if t_enter >= t_exit:
            return None
        t_enter = max(t_enter, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - random() lies in (0, 1], keeping the logarithm finite.
        hit_distance = self.neg_inv_density * math.log(1.0 - rng.random())

        if hit_distance > distance_inside_boundary:
            return None

        rec = HitRecord()
        rec.t = t_enter + hit_distance / ray_length
        rec.p = ray.at(rec.t)
        rec.normal = Vector3(1.0, 0.0, 0.0)  # arbitrary
        rec.front_face = True
        rec.material = self.phase_function
        return rec

    def bounding_box(self) -> AABB:
        return self.boundary.bounding_box()
