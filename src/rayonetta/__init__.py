"""Offline Monte-Carlo path tracer.

Subpackages:
    core: vectors, rays, intervals, bounding boxes and random sampling
    geometry: hittable primitives, transforms, media and the BVH
    materials: scattering models, textures and Perlin noise
    camera: camera model and radiance integrator
    renderer: parallel scanline scheduling and image output
"""

__version__ = "0.1.0"
