# geometry/hittable.py
import random
from typing import Optional
from rayonetta.core.aabb import AABB
from rayonetta.core.interval import Interval
from rayonetta.core.ray import Ray
from rayonetta.core.vector import Vector3


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("p", "normal", "t", "u", "v", "front_face", "material")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0.0, u: float = 0.0, v: float = 0.0,
                 front_face: bool = True, material=None):
        self.p = p              # Intersection point
        self.normal = normal    # Surface normal, always against the incoming ray
        self.t = t              # Ray parameter at intersection
        self.u = u              # Texture coordinates
        self.v = v
        self.front_face = front_face
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        outward_normal is assumed to have unit length.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.

    rng is the random source of the calling task. Deterministic geometry
    ignores it; participating media draw their free-flight distances from it.
    """
    def hit(self, ray: Ray, ray_t: Interval, rng=random) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> AABB:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
