# camera/camera.py
import math
import random
from typing import Optional, Union
import numpy as np
from rayonetta.camera.background import Background, SkyGradient, SolidBackground
from rayonetta.core.interval import Interval
from rayonetta.core.ray import Ray
from rayonetta.core.utils import degrees_to_radians, random_in_unit_disk
from rayonetta.core.vector import Color, Point3, Vector3
from rayonetta.renderer.raytracer import Renderer

BLACK = Color(0.0, 0.0, 0.0)

# Lower bound of every scene query, so a scattered ray does not hit the
# surface it leaves from.
SHADOW_ACNE_EPSILON = 0.001


class Camera:
    """
    Positionable thin-lens camera and path-tracing integrator.

    Configuration is passed as keyword arguments. The derived basis and
    pixel grid are computed once by initialize(), after which the camera is
    only read, so it can be shared by every render worker.
    """
    def __init__(self,
                 aspect_ratio: float = 1.0,
                 image_width: int = 100,
                 samples_per_pixel: int = 10,
                 max_depth: int = 10,
                 vfov: float = 90.0,
                 lookfrom: Point3 = Point3(0.0, 0.0, 0.0),
                 lookat: Point3 = Point3(0.0, 0.0, -1.0),
                 vup: Vector3 = Vector3(0.0, 1.0, 0.0),
                 defocus_angle: float = 0.0,
                 focus_dist: float = 10.0,
                 background: Optional[Union[Background, Color]] = None):
        self.aspect_ratio = aspect_ratio
        self.image_width = image_width
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.vfov = vfov                    # Vertical field of view in degrees
        self.lookfrom = lookfrom
        self.lookat = lookat
        self.vup = vup
        self.defocus_angle = defocus_angle  # Aperture cone angle in degrees; 0 disables depth of field
        self.focus_dist = focus_dist        # Distance to the plane of perfect focus

        if background is None:
            background = SkyGradient()
        elif isinstance(background, Vector3):
            background = SolidBackground(background)
        self.background = background

        self.initialized = False

    def initialize(self):
        """Validates the configuration and derives the pixel grid and lens basis."""
        if self.initialized:
            return
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.image_width <= 0:
            raise ValueError(f"image_width must be positive, got {self.image_width}")
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")
        if self.focus_dist <= 0:
            raise ValueError(f"focus_dist must be positive, got {self.focus_dist}")

        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self.pixel_samples_scale = 1.0 / self.samples_per_pixel
        self.center = self.lookfrom

        # Viewport dimensions on the focus plane
        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2 * h * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        # Orthonormal camera basis
        self.w = (self.lookfrom - self.lookat).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Vectors across the horizontal and down the vertical viewport edges
        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center
                               - self.w * self.focus_dist
                               - viewport_u / 2
                               - viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

        self.initialized = True

    def get_ray(self, i: int, j: int, rng=random) -> Ray:
        """
        Ray through a random point of pixel (i, j), leaving from the defocus
        disk at a random instant of the shutter interval.
        """
        offset_x = rng.random() - 0.5
        offset_y = rng.random() - 0.5
        pixel_sample = (self.pixel00_loc
                        + self.pixel_delta_u * (i + offset_x)
                        + self.pixel_delta_v * (j + offset_y))

        if self.defocus_angle <= 0:
            ray_origin = self.center
        else:
            ray_origin = self.defocus_disk_sample(rng)
        ray_direction = pixel_sample - ray_origin
        ray_time = rng.random()

        return Ray(ray_origin, ray_direction, ray_time)

    def defocus_disk_sample(self, rng=random) -> Point3:
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y

    def ray_color(self, ray: Ray, depth: int, world, rng=random) -> Color:
        """
        Radiance arriving along `ray`, estimated by following one random
        scattering path for at most `depth` bounces.
        """
        # Bounce limit exceeded: no more light is gathered.
        if depth <= 0:
            return BLACK

        rec = world.hit(ray, Interval(SHADOW_ACNE_EPSILON, math.inf), rng)
        if rec is None:
            return self.background.value(ray)

        emitted = rec.material.emitted(rec.u, rec.v, rec.p)
        scatter = rec.material.scatter(ray, rec, rng)
        if scatter is None:
            return emitted

        attenuation, scattered = scatter
        return emitted + attenuation * self.ray_color(scattered, depth - 1, world, rng)

    def render_row(self, j: int, world, rng=random) -> np.ndarray:
        """Averaged linear colors of scanline j, shaped (image_width, 3)."""
        self.initialize()
        row = np.zeros((self.image_width, 3), dtype=np.float64)
        for i in range(self.image_width):
            r = g = b = 0.0
            for _ in range(self.samples_per_pixel):
                color = self.ray_color(self.get_ray(i, j, rng), self.max_depth, world, rng)
                r += color.x
                g += color.y
                b += color.z
            row[i] = (r * self.pixel_samples_scale,
                      g * self.pixel_samples_scale,
                      b * self.pixel_samples_scale)
        return row

    def render(self, world, workers: Optional[int] = None, backend: str = "process",
               seed: Optional[int] = None, progress: bool = True) -> np.ndarray:
        """
        Renders `world` into a linear (image_height, image_width, 3) array.
        Gamma correction and quantization happen in renderer.tone_mapping.
        """
        self.initialize()
        renderer = Renderer(workers=workers, backend=backend, seed=seed, progress=progress)
        return renderer.render(self, world)
