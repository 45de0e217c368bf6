# core/aabb.py
from rayonetta.core.interval import Interval
from rayonetta.core.vector import Vector3

# Minimum thickness of any box axis, so flat primitives still have a volume
# the slab test can hit.
MIN_THICKNESS = 0.0001


class AABB:
    """
    Axis-aligned bounding box made of one Interval per axis.
    """
    __slots__ = ("x", "y", "z")

    EMPTY: "AABB"
    UNIVERSE: "AABB"

    def __init__(self, x: Interval, y: Interval, z: Interval):
        self.x = x if x.size() >= MIN_THICKNESS else x.expand(MIN_THICKNESS)
        self.y = y if y.size() >= MIN_THICKNESS else y.expand(MIN_THICKNESS)
        self.z = z if z.size() >= MIN_THICKNESS else z.expand(MIN_THICKNESS)

    @classmethod
    def from_points(cls, a: Vector3, b: Vector3) -> "AABB":
        """Box spanned by two opposite corners, given in any order."""
        return cls(
            Interval(min(a.x, b.x), max(a.x, b.x)),
            Interval(min(a.y, b.y), max(a.y, b.y)),
            Interval(min(a.z, b.z), max(a.z, b.z))
        )

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return AABB(
            Interval.union(box0.x, box1.x),
            Interval.union(box0.y, box1.y),
            Interval.union(box0.z, box1.z)
        )

    def axis_interval(self, n: int) -> Interval:
        if n == 0:
            return self.x
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        raise IndexError(f"Invalid axis for bounding box: {n}")

    def longest_axis(self) -> int:
        if self.x.size() > self.y.size():
            return 0 if self.x.size() > self.z.size() else 2
        return 1 if self.y.size() > self.z.size() else 2

    def contains_point(self, p: Vector3) -> bool:
        return self.x.contains(p.x) and self.y.contains(p.y) and self.z.contains(p.z)

    def hit(self, ray, ray_t: Interval) -> bool:
        # Slab method: narrow [t_min, t_max] axis by axis.
        t_min = ray_t.min
        t_max = ray_t.max
        origin = ray.origin
        direction = ray.direction
        for axis in range(3):
            ax = self.axis_interval(axis)
            d = direction[axis]
            o = origin[axis]
            if d == 0.0:
                # Parallel to this slab: either always inside it or never.
                if o < ax.min or o > ax.max:
                    return False
                continue
            inv_d = 1.0 / d
            t0 = (ax.min - o) * inv_d
            t1 = (ax.max - o) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            if t0 > t_min:
                t_min = t0
            if t1 < t_max:
                t_max = t1
            if t_max <= t_min:
                return False
        return True

    def __add__(self, offset: Vector3) -> "AABB":
        return AABB(self.x + offset.x, self.y + offset.y, self.z + offset.z)

    def __radd__(self, offset: Vector3) -> "AABB":
        return self.__add__(offset)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"AABB({self.x!r}, {self.y!r}, {self.z!r})"


AABB.EMPTY = AABB(Interval.EMPTY, Interval.EMPTY, Interval.EMPTY)
AABB.UNIVERSE = AABB(Interval.UNIVERSE, Interval.UNIVERSE, Interval.UNIVERSE)
