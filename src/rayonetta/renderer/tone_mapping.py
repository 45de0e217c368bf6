# renderer/tone_mapping.py
import os
from typing import TextIO
import numpy as np
from PIL import Image

# Upper clamp keeps 256 * x below 256 so every channel fits in a byte.
INTENSITY_MAX = 0.999


def linear_to_gamma(linear: np.ndarray) -> np.ndarray:
    """
    Gamma 2 correction: square root of positive values, zero elsewhere.
    """
    linear = np.nan_to_num(np.asarray(linear, dtype=np.float64), nan=0.0)
    return np.sqrt(np.maximum(linear, 0.0))


def to_bytes(linear: np.ndarray) -> np.ndarray:
    """
    Convert a linear radiance image to 8-bit sRGB-ish values.
    """
    mapped = linear_to_gamma(linear)
    return (256.0 * mapped.clip(0.0, INTENSITY_MAX)).astype(np.uint8)


def write_ppm(linear: np.ndarray, stream: TextIO):
    """
    Write the image as plain-text PPM (P3): a header, then one "R G B" line
    per pixel in row-major order.
    """
    pixels = to_bytes(linear)
    height, width = pixels.shape[:2]
    stream.write(f"P3\n{width} {height}\n255\n")
    for row in pixels:
        stream.write("".join(f"{r} {g} {b}\n" for r, g, b in row))


def save_image(linear: np.ndarray, path: str):
    """
    Save to `path`: plain PPM for .ppm files, otherwise any format Pillow
    can write (PNG, JPEG, ...).
    """
    if os.path.splitext(path)[1].lower() == ".ppm":
        with open(path, "w") as f:
            write_ppm(linear, f)
        return
    Image.fromarray(to_bytes(linear)).save(path)
