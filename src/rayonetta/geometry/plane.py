# geometry/plane.py
import random
from typing import Optional
from rayonetta.core.aabb import AABB
from rayonetta.core.interval import Interval
from rayonetta.core.ray import Ray
from rayonetta.core.vector import Vector3
from rayonetta.geometry.hittable import Hittable, HitRecord

# Rays closer than this to parallel with a plane never hit it.
PARALLEL_EPSILON = 1e-6


class Plane(Hittable):
    """
    Unbounded plane through `point` with the given normal.

    Its bounding box is the whole space, so it belongs next to a BVH rather
    than inside one.
    """
    def __init__(self, normal: Vector3, point: Vector3, material):
        self.normal = normal.normalize()
        self.offset = -self.normal.dot(point)
        self.material = material

    def hit(self, ray: Ray, ray_t: Interval, rng=random) -> Optional[HitRecord]:
        denominator = self.normal.dot(ray.direction)
        if abs(denominator) < PARALLEL_EPSILON:
            return None

        t = -(self.normal.dot(ray.origin) + self.offset) / denominator
        if not ray_t.surrounds(t):
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = ray.at(t)
        rec.set_face_normal(ray, self.normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        return AABB.UNIVERSE
