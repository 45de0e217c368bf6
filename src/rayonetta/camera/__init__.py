"""Camera model, ray generation and the path-tracing integrator."""

from .background import Background, SkyGradient, SolidBackground
from .camera import Camera

__all__ = [
    "Camera",
    "Background",
    "SkyGradient",
    "SolidBackground",
]
