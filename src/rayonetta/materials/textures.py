# materials/textures.py
import math
import random
from typing import Union
from rayonetta.core.interval import Interval
from rayonetta.core.vector import Color, Vector3
from rayonetta.materials.perlin import Perlin
from rayonetta.materials.texture_loader import RasterImage, load_image

UNIT_INTERVAL = Interval(0.0, 1.0)


class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Color:
        """Color at texture coordinates (u, v) and hit point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")


def as_texture(albedo: Union[Vector3, Texture]) -> Texture:
    """Wraps a plain color in a SolidColor; textures pass through."""
    if isinstance(albedo, Vector3):
        return SolidColor(albedo)
    return albedo


class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> "SolidColor":
        return cls(Color(r, g, b))

    def value(self, u: float, v: float, p: Vector3) -> Color:
        return self.color


class CheckerTexture(Texture):
    """
    A 3D checker pattern: space is cut into cubes of side `scale` that
    alternate between the even and odd textures.
    """
    def __init__(self, scale: float, even: Union[Vector3, Texture], odd: Union[Vector3, Texture]):
        self.inv_scale = 1.0 / scale
        self.even = as_texture(even)
        self.odd = as_texture(odd)

    def value(self, u: float, v: float, p: Vector3) -> Color:
        x = math.floor(self.inv_scale * p.x)
        y = math.floor(self.inv_scale * p.y)
        z = math.floor(self.inv_scale * p.z)
        # Python's % is floored, so negative cells alternate too.
        if (x + y + z) % 2 == 0:
            return self.even.value(u, v, p)
        return self.odd.value(u, v, p)


class ImageTexture(Texture):
    """A texture from an image file, or from an already decoded RasterImage."""
    def __init__(self, image: Union[str, RasterImage]):
        if isinstance(image, RasterImage):
            self.image = image
        else:
            self.image = load_image(image)

    def value(self, u: float, v: float, p: Vector3) -> Color:
        # Solid cyan makes a missing image obvious in the render.
        if self.image.height <= 0:
            return Color(0.0, 1.0, 1.0)

        u = UNIT_INTERVAL.clamp(u)
        v = 1.0 - UNIT_INTERVAL.clamp(v)  # Row 0 is the top of the image

        i = int(u * self.image.width)
        j = int(v * self.image.height)
        return self.image.pixel(i, j)


class NoiseTexture(Texture):
    """A marble-like procedural texture driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, rng=random):
        self.scale = scale
        self.noise = Perlin(rng)

    def value(self, u: float, v: float, p: Vector3) -> Color:
        phase = self.scale * p.z + 10.0 * self.noise.turb(p, 7)
        return Color(0.5, 0.5, 0.5) * (1.0 + math.sin(phase))
