"""Geometry: the hittable contract, primitives, transforms, media and the BVH.

Every shape implements two operations:

    hit(ray, ray_t, rng) -> Optional[HitRecord]
    bounding_box() -> AABB
"""

from .bvh import BVHNode
from .hittable import HitRecord, Hittable
from .medium import ConstantMedium
from .plane import Plane
from .quad import Quad, make_box
from .sphere import Sphere, sphere_uv
from .transforms import RotateY, Translate
from .world import HittableList

__all__ = [
    "Hittable",
    "HitRecord",
    "HittableList",
    "BVHNode",
    "Sphere",
    "sphere_uv",
    "Plane",
    "Quad",
    "make_box",
    "Translate",
    "RotateY",
    "ConstantMedium",
]
