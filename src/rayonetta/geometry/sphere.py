# geometry/sphere.py
import math
import random
from typing import Optional, Tuple
from rayonetta.core.aabb import AABB
from rayonetta.core.interval import Interval
from rayonetta.core.ray import Ray
from rayonetta.core.vector import Vector3
from rayonetta.geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    A moving sphere travels linearly from `center` at time 0 to `center2` at
    time 1; the center is evaluated at the incoming ray's time.
    """
    def __init__(self, center: Vector3, radius: float, material,
                 center2: Optional[Vector3] = None):
        self.center = center
        self.motion = None if center2 is None else center2 - center
        self.radius = max(radius, 0.0)
        self.material = material

        rvec = Vector3(self.radius, self.radius, self.radius)
        self.box = AABB.from_points(center - rvec, center + rvec)
        if center2 is not None:
            box2 = AABB.from_points(center2 - rvec, center2 + rvec)
            self.box = AABB.surrounding_box(self.box, box2)

    @classmethod
    def moving(cls, center1: Vector3, center2: Vector3, radius: float, material) -> "Sphere":
        return cls(center1, radius, material, center2=center2)

    def center_at(self, time: float) -> Vector3:
        if self.motion is None:
            return self.center
        return self.center + self.motion * time

    def hit(self, ray: Ray, ray_t: Interval, rng=random) -> Optional[HitRecord]:
        if self.radius <= 0.0:
            return None

        current_center = self.center_at(ray.time)
        oc = current_center - ray.origin
        a = ray.direction.length_squared()
        h = ray.direction.dot(oc)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = h * h - a * c

        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (h - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (h + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(root)
        outward_normal = (rec.p - current_center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.u, rec.v = sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        return self.box


def sphere_uv(p: Vector3) -> Tuple[float, float]:
    """
    Maps a point on the unit sphere to texture coordinates.
    u runs around the y axis starting from -x, v from the south pole (-y)
    to the north pole (+y).
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi
