# core/interval.py
import math


class Interval:
    """
    A closed scalar range [min, max]. An interval whose min exceeds its max
    is empty.
    """
    __slots__ = ("min", "max")

    EMPTY: "Interval"
    UNIVERSE: "Interval"

    def __init__(self, min: float, max: float):
        self.min = min
        self.max = max

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def expand(self, delta: float) -> "Interval":
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)

    @staticmethod
    def union(a: "Interval", b: "Interval") -> "Interval":
        """Smallest interval enclosing both a and b."""
        return Interval(min(a.min, b.min), max(a.max, b.max))

    def __add__(self, displacement: float) -> "Interval":
        return Interval(self.min + displacement, self.max + displacement)

    def __radd__(self, displacement: float) -> "Interval":
        return self.__add__(displacement)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __hash__(self) -> int:
        return hash((self.min, self.max))

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


Interval.EMPTY = Interval(math.inf, -math.inf)
Interval.UNIVERSE = Interval(-math.inf, math.inf)
