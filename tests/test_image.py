"""Tests for image buffers."""

import numpy as np
import pytest
from PIL import Image

from pathweaver.image import new_image, enumerate_pixels, save_image


class TestNewImage:
    """Test buffer allocation."""

    def test_shape_and_dtype(self):
        image = new_image(4, 3)
        assert image.shape == (3, 4, 3)
        assert image.dtype == np.uint8

    def test_starts_black(self):
        assert not new_image(2, 2).any()


class TestEnumeratePixels:
    """Test pixel iteration order."""

    def test_row_major_from_top_left(self):
        image = new_image(2, 2)
        assert list(enumerate_pixels(image)) == [(0, 0), (1, 0), (0, 1), (1, 1)]

    def test_covers_every_pixel(self):
        image = new_image(5, 3)
        assert len(set(enumerate_pixels(image))) == 15


class TestSaveImage:
    """Test file encoding."""

    def test_round_trip_png(self, tmp_path):
        image = new_image(3, 2)
        image[0, 0] = (254, 0, 0)
        image[1, 2] = (0, 127, 64)

        filename = tmp_path / "out" / "render.png"
        save_image(image, str(filename))

        assert filename.exists()
        loaded = np.asarray(Image.open(filename).convert('RGB'))
        assert np.array_equal(loaded, image)
