"""Materials and textures.

A material decides what happens to a ray at a hit point:

    scatter(ray_in, rec, rng) -> Optional[(attenuation, scattered_ray)]
    emitted(u, v, p) -> Color

A texture supplies the color a material uses at a point:

    value(u, v, p) -> Color
"""

from .dielectric import Dielectric
from .diffuse_light import DiffuseLight
from .isotropic import Isotropic
from .lambertian import Lambertian
from .material import Material
from .metal import Metal
from .perlin import Perlin
from .texture_loader import ImageDecodeError, RasterImage, load_image
from .textures import (
    CheckerTexture,
    ImageTexture,
    NoiseTexture,
    SolidColor,
    Texture,
    as_texture,
)

__all__ = [
    "Material",
    "Lambertian",
    "Metal",
    "Dielectric",
    "Isotropic",
    "DiffuseLight",
    "Texture",
    "SolidColor",
    "CheckerTexture",
    "ImageTexture",
    "NoiseTexture",
    "as_texture",
    "Perlin",
    "RasterImage",
    "ImageDecodeError",
    "load_image",
]
