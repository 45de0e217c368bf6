# geometry/world.py
import random
from typing import Iterable, List, Optional
from rayonetta.core.aabb import AABB
from rayonetta.core.interval import Interval
from rayonetta.core.ray import Ray
from rayonetta.geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    A list of Hittable objects, queried by a linear nearest-hit scan.
    Wrap it in a BVHNode for sub-linear queries on large scenes.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = []
        self.box = AABB.EMPTY
        for obj in objects:
            self.add(obj)

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.box = AABB.surrounding_box(self.box, obj.bounding_box())

    def clear(self):
        self.objects.clear()
        self.box = AABB.EMPTY

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(self, ray: Ray, ray_t: Interval, rng=random) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far), rng)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        return self.box
