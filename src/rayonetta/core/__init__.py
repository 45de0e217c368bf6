"""Core building blocks: vectors, rays, intervals, bounding boxes and sampling."""

from .aabb import AABB
from .interval import Interval
from .ray import Ray
from .utils import (
    degrees_to_radians,
    random_in_unit_disk,
    random_in_unit_sphere,
    random_on_hemisphere,
    random_unit_vector,
    reflect,
    refract,
    schlick,
)
from .vector import Color, Point3, Vector3

__all__ = [
    "Vector3",
    "Point3",
    "Color",
    "Ray",
    "Interval",
    "AABB",
    "degrees_to_radians",
    "random_in_unit_sphere",
    "random_unit_vector",
    "random_on_hemisphere",
    "random_in_unit_disk",
    "reflect",
    "refract",
    "schlick",
]
