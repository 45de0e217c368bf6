# materials/perlin.py
import math
import random
import numpy as np
from numba import njit
from rayonetta.core.vector import Vector3

POINT_COUNT = 256


@njit
def _noise(x, y, z, perm_x, perm_y, perm_z, ranvec):
    fx = math.floor(x)
    fy = math.floor(y)
    fz = math.floor(z)
    u = x - fx
    v = y - fy
    w = z - fz
    i = int(fx)
    j = int(fy)
    k = int(fz)

    # Hermite smoothing of the interpolation weights.
    uu = u * u * (3.0 - 2.0 * u)
    vv = v * v * (3.0 - 2.0 * v)
    ww = w * w * (3.0 - 2.0 * w)

    accum = 0.0
    for di in range(2):
        for dj in range(2):
            for dk in range(2):
                idx = perm_x[(i + di) & 255] ^ perm_y[(j + dj) & 255] ^ perm_z[(k + dk) & 255]
                gx = ranvec[idx, 0]
                gy = ranvec[idx, 1]
                gz = ranvec[idx, 2]
                dot = gx * (u - di) + gy * (v - dj) + gz * (w - dk)
                accum += ((di * uu + (1 - di) * (1.0 - uu))
                          * (dj * vv + (1 - dj) * (1.0 - vv))
                          * (dk * ww + (1 - dk) * (1.0 - ww))
                          * dot)
    return accum


@njit
def _turbulence(x, y, z, depth, perm_x, perm_y, perm_z, ranvec):
    accum = 0.0
    weight = 1.0
    for _ in range(depth):
        accum += weight * _noise(x, y, z, perm_x, perm_y, perm_z, ranvec)
        weight *= 0.5
        x *= 2.0
        y *= 2.0
        z *= 2.0
    return abs(accum)


class Perlin:
    """
    Gradient-lattice (Perlin) noise.

    The gradient table and the three permutation tables are drawn once from
    `rng` at construction and never modified, so one instance can be shared
    by every render worker.
    """
    def __init__(self, rng=random):
        ranvec = np.empty((POINT_COUNT, 3), dtype=np.float64)
        for i in range(POINT_COUNT):
            g = Vector3.random(rng, -1.0, 1.0)
            while g.near_zero():
                g = Vector3.random(rng, -1.0, 1.0)
            g = g.normalize()
            ranvec[i] = (g.x, g.y, g.z)
        self.ranvec = ranvec
        self.perm_x = self._generate_perm(rng)
        self.perm_y = self._generate_perm(rng)
        self.perm_z = self._generate_perm(rng)
        for table in (self.ranvec, self.perm_x, self.perm_y, self.perm_z):
            table.setflags(write=False)

    @staticmethod
    def _generate_perm(rng) -> np.ndarray:
        points = list(range(POINT_COUNT))
        # Fisher-Yates shuffle
        for i in range(POINT_COUNT - 1, 0, -1):
            target = rng.randint(0, i)
            points[i], points[target] = points[target], points[i]
        return np.array(points, dtype=np.int64)

    def noise(self, p: Vector3) -> float:
        """Smooth noise in roughly [-1, 1]."""
        return _noise(float(p.x), float(p.y), float(p.z),
                      self.perm_x, self.perm_y, self.perm_z, self.ranvec)

    def turb(self, p: Vector3, depth: int = 7) -> float:
        """Sum of `depth` octaves, each at double the frequency and half the weight."""
        return _turbulence(float(p.x), float(p.y), float(p.z), depth,
                           self.perm_x, self.perm_y, self.perm_z, self.ranvec)
