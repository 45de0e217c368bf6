# geometry/transforms.py
import math
import random
from typing import Optional
from rayonetta.core.aabb import AABB
from rayonetta.core.interval import Interval
from rayonetta.core.ray import Ray
from rayonetta.core.utils import degrees_to_radians
from rayonetta.core.vector import Vector3
from rayonetta.geometry.hittable import Hittable, HitRecord


class Translate(Hittable):
    """
    Moves an object by `offset` without copying its geometry.
    Rays are moved by -offset into object space and hits moved back.
    """
    def __init__(self, obj: Hittable, offset: Vector3):
        self.object = obj
        self.offset = offset
        self.box = obj.bounding_box() + offset

    def hit(self, ray: Ray, ray_t: Interval, rng=random) -> Optional[HitRecord]:
        offset_ray = Ray(ray.origin - self.offset, ray.direction, ray.time)

        rec = self.object.hit(offset_ray, ray_t, rng)
        if rec is None:
            return None

        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self) -> AABB:
        return self.box


class RotateY(Hittable):
    """
    Rotates an object about the y axis by a fixed angle in degrees.
    """
    def __init__(self, obj: Hittable, angle: float):
        self.object = obj
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

        # Bound every rotated corner of the child's box.
        box = obj.bounding_box()
        lo = [math.inf, math.inf, math.inf]
        hi = [-math.inf, -math.inf, -math.inf]
        for x in (box.x.min, box.x.max):
            for y in (box.y.min, box.y.max):
                for z in (box.z.min, box.z.max):
                    corner = self._to_world(Vector3(x, y, z))
                    for c in range(3):
                        lo[c] = min(lo[c], corner[c])
                        hi[c] = max(hi[c], corner[c])
        self.box = AABB.from_points(Vector3(*lo), Vector3(*hi))

    def _to_object(self, p: Vector3) -> Vector3:
        return Vector3(
            self.cos_theta * p.x - self.sin_theta * p.z,
            p.y,
            self.sin_theta * p.x + self.cos_theta * p.z
        )

    def _to_world(self, p: Vector3) -> Vector3:
        return Vector3(
            self.cos_theta * p.x + self.sin_theta * p.z,
            p.y,
            -self.sin_theta * p.x + self.cos_theta * p.z
        )

    def hit(self, ray: Ray, ray_t: Interval, rng=random) -> Optional[HitRecord]:
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)

        rec = self.object.hit(rotated, ray_t, rng)
        if rec is None:
            return None

        rec.p = self._to_world(rec.p)
        rec.normal = self._to_world(rec.normal)
        return rec

    def bounding_box(self) -> AABB:
        return self.box
