"""Scanline scheduling and output formatting."""

from .raytracer import BACKENDS, Renderer, row_seeds
from .tone_mapping import linear_to_gamma, save_image, to_bytes, write_ppm

__all__ = [
    "Renderer",
    "BACKENDS",
    "row_seeds",
    "linear_to_gamma",
    "to_bytes",
    "write_ppm",
    "save_image",
]
