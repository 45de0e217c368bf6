# camera/background.py
from rayonetta.core.ray import Ray
from rayonetta.core.vector import Color


class Background:
    """Radiance carried by rays that escape the scene."""
    def value(self, ray: Ray) -> Color:
        raise NotImplementedError("value() must be implemented by background subclasses.")


class SolidBackground(Background):
    """The same color in every direction. Black makes the scene's lights the only source."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, ray: Ray) -> Color:
        return self.color

    def __repr__(self) -> str:
        return f"SolidBackground({self.color!r})"


class SkyGradient(Background):
    """
    Vertical blend from `horizon` (looking down) to `zenith` (looking up),
    indexed by the y component of the unit ray direction.
    """
    def __init__(self, horizon: Color = Color(1.0, 1.0, 1.0), zenith: Color = Color(0.5, 0.7, 0.9)):
        self.horizon = horizon
        self.zenith = zenith

    def value(self, ray: Ray) -> Color:
        unit_direction = ray.direction.normalize()
        a = 0.5 * (unit_direction.y + 1.0)
        return self.horizon * (1.0 - a) + self.zenith * a

    def __repr__(self) -> str:
        return f"SkyGradient({self.horizon!r}, {self.zenith!r})"
