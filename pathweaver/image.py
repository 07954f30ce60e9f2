"""
8-bit RGB image buffers.

Images are numpy uint8 arrays of shape (height, width, 3), indexed
``image[y, x]`` with row 0 at the top.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterator, Tuple
import numpy as np

logger = logging.getLogger(__name__)


def new_image(width: int, height: int) -> np.ndarray:
    """Allocate a black image buffer."""
    return np.zeros((height, width, 3), dtype=np.uint8)


def enumerate_pixels(image: np.ndarray) -> Iterator[Tuple[int, int]]:
    """Yield (x, y) for every pixel, row by row from the top left."""
    height, width = image.shape[:2]
    for y in range(height):
        for x in range(width):
            yield x, y


def save_image(image: np.ndarray, filename: str) -> None:
    """Save image to file.

    Args:
        image: uint8 image array
        filename: Output filename (extension determines format)
    """
    from PIL import Image as PILImage

    path = Path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)

    pil_image = PILImage.fromarray(image, 'RGB')
    pil_image.save(path)
    logger.debug("Saved %dx%d image to %s", image.shape[1], image.shape[0], path)
