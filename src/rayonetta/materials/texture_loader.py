# materials/texture_loader.py
import os
import numpy as np
from PIL import Image, UnidentifiedImageError
from rayonetta.core.vector import Color


class ImageDecodeError(ValueError):
    """The file exists but could not be decoded as an image."""


class RasterImage:
    """
    Decoded RGB bitmap with values normalized to [0, 1].
    Pixel lookups clamp coordinates to the image bounds.
    """
    def __init__(self, data: np.ndarray):
        if data.ndim != 3 or data.shape[2] != 3:
            raise ValueError(f"Expected an (height, width, 3) array, got shape {data.shape}")
        self.data = data
        self.height = data.shape[0]
        self.width = data.shape[1]

    def pixel(self, x: int, y: int) -> Color:
        x = min(max(x, 0), self.width - 1)
        y = min(max(y, 0), self.height - 1)
        r, g, b = self.data[y, x]
        return Color(float(r), float(g), float(b))


def load_image(image_path: str) -> RasterImage:
    """
    Load an image file as an RGB raster.

    Args:
        image_path: Path to the image file

    Returns:
        RasterImage holding the decoded pixels

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ImageDecodeError: If the file can't be decoded as an image
    """
    if not os.path.isfile(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            # Convert to RGB if necessary
            if img.mode != 'RGB':
                img = img.convert('RGB')
            data = np.asarray(img, dtype=np.float64) / 255.0
    except (UnidentifiedImageError, OSError) as e:
        raise ImageDecodeError(f"Error decoding texture {image_path}: {e}") from e

    return RasterImage(data)
