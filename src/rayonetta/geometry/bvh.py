# geometry/bvh.py
import random
from typing import Optional, Sequence
from rayonetta.core.aabb import AABB
from rayonetta.core.interval import Interval
from rayonetta.core.ray import Ray
from rayonetta.geometry.hittable import Hittable, HitRecord


class BVHNode(Hittable):
    """
    Bounding volume hierarchy over a fixed set of objects.

    Each node splits its span along the longest axis of the span's bounding
    box, ordered by the minimum of each object's extent on that axis, and
    halves the object count. A span of one object is a leaf that holds the
    same object on both sides. The tree is immutable once built.
    """
    def __init__(self, objects: Sequence[Hittable], start: int = 0, end: Optional[int] = None):
        if end is None:
            # Snapshot so later edits to the caller's list never reach the tree.
            objects = list(objects)
            end = len(objects)
        object_span = end - start
        if object_span <= 0:
            raise ValueError("BVHNode needs at least one object")

        # Compute the bounding box of all objects for this node
        self.box = AABB.EMPTY
        for i in range(start, end):
            self.box = AABB.surrounding_box(self.box, objects[i].bounding_box())

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            self.left = objects[start]
            self.right = objects[start + 1]
        else:
            axis = self.box.longest_axis()
            objects[start:end] = sorted(
                objects[start:end],
                key=lambda obj: obj.bounding_box().axis_interval(axis).min)

            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid)
            self.right = BVHNode(objects, mid, end)

    @classmethod
    def from_list(cls, world) -> "BVHNode":
        """Builds a tree over the current members of a HittableList."""
        return cls(world.objects)

    @property
    def is_leaf(self) -> bool:
        return self.left is self.right

    def hit(self, ray: Ray, ray_t: Interval, rng=random) -> Optional[HitRecord]:
        if not self.box.hit(ray, ray_t):
            return None

        hit_left = self.left.hit(ray, ray_t, rng)
        if self.is_leaf:
            return hit_left

        # Anything the right subtree reports must now be strictly closer.
        right_t = Interval(ray_t.min, hit_left.t if hit_left is not None else ray_t.max)
        hit_right = self.right.hit(ray, right_t, rng)

        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box
