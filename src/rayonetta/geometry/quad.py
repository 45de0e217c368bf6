# geometry/quad.py
import math
import random
from typing import Optional
from rayonetta.core.aabb import AABB
from rayonetta.core.interval import Interval
from rayonetta.core.ray import Ray
from rayonetta.core.vector import Vector3
from rayonetta.geometry.hittable import Hittable, HitRecord
from rayonetta.geometry.plane import PARALLEL_EPSILON
from rayonetta.geometry.world import HittableList

UNIT_INTERVAL = Interval(0.0, 1.0)


class Quad(Hittable):
    """
    Parallelogram patch with corner q and edges u and v.

    Hits are found on the supporting plane and accepted when their planar
    coordinates (alpha, beta) in the (u, v) basis both lie in [0, 1]; those
    coordinates double as texture coordinates.
    """
    def __init__(self, q: Vector3, u: Vector3, v: Vector3, material):
        self.q = q
        self.u = u
        self.v = v
        self.material = material

        n = u.cross(v)
        self.normal = n.normalize()
        self.offset = -self.normal.dot(q)
        length_squared = n.dot(n)
        # Zero-area patch: NaN coordinates fail every interior test.
        if length_squared == 0.0:
            self.w = Vector3(math.nan, math.nan, math.nan)
        else:
            self.w = n / length_squared

        self.box = AABB.surrounding_box(
            AABB.from_points(q, q + u + v),
            AABB.from_points(q + u, q + v)
        )

    def hit(self, ray: Ray, ray_t: Interval, rng=random) -> Optional[HitRecord]:
        denominator = self.normal.dot(ray.direction)
        if abs(denominator) < PARALLEL_EPSILON:
            return None

        t = -(self.normal.dot(ray.origin) + self.offset) / denominator
        if not ray_t.surrounds(t):
            return None

        intersection = ray.at(t)
        planar_hit = intersection - self.q
        alpha = self.w.dot(planar_hit.cross(self.v))
        beta = self.w.dot(self.u.cross(planar_hit))
        if not (UNIT_INTERVAL.contains(alpha) and UNIT_INTERVAL.contains(beta)):
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = intersection
        rec.u = alpha
        rec.v = beta
        rec.set_face_normal(ray, self.normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        return self.box


def make_box(a: Vector3, b: Vector3, material) -> HittableList:
    """
    Closed box with opposite corners a and b, built from six quads whose
    normals all face outwards.
    """
    sides = HittableList()

    lo = Vector3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
    hi = Vector3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    dx = Vector3(hi.x - lo.x, 0.0, 0.0)
    dy = Vector3(0.0, hi.y - lo.y, 0.0)
    dz = Vector3(0.0, 0.0, hi.z - lo.z)

    sides.add(Quad(Vector3(lo.x, lo.y, hi.z), dx, dy, material))   # front
    sides.add(Quad(Vector3(hi.x, lo.y, hi.z), -dz, dy, material))  # right
    sides.add(Quad(Vector3(hi.x, lo.y, lo.z), -dx, dy, material))  # back
    sides.add(Quad(Vector3(lo.x, lo.y, lo.z), dz, dy, material))   # left
    sides.add(Quad(Vector3(lo.x, hi.y, hi.z), dx, -dz, material))  # top
    sides.add(Quad(Vector3(lo.x, lo.y, lo.z), dx, dz, material))   # bottom

    return sides
