"""
Unit tests for ImageConverter

Tests cover:
- Pillow image -> handle (shape, dtype, read-only, mode normalisation)
- Handle -> Pillow image
- Inputs that cannot be converted
"""

import numpy as np
import pytest
from PIL import Image

from overlay.services import ImageConverter

from image_helpers import make_image, SQUARE_COLOR, POLYGON_COLOR


def test_to_handle_shape_and_dtype():
    handle = ImageConverter.to_handle(make_image(SQUARE_COLOR, size=(8, 6)))

    assert handle.shape == (6, 8, 4)
    assert handle.dtype == np.uint8
    assert tuple(handle[0, 0]) == SQUARE_COLOR


def test_to_handle_is_read_only():
    handle = ImageConverter.to_handle(make_image(SQUARE_COLOR))

    with pytest.raises(ValueError):
        handle[0, 0, 0] = 1


@pytest.mark.parametrize('mode, color, expected', [
    ('L', 200, (200, 200, 200, 255)),
    ('RGB', (10, 20, 30), (10, 20, 30, 255)),
    ('LA', (50, 60), (50, 50, 50, 60)),
])
def test_to_handle_converts_mode(mode, color, expected):
    handle = ImageConverter.to_handle(make_image(color, mode=mode))

    assert tuple(handle[0, 0]) == expected


def test_to_handle_palette_image():
    image = make_image((255, 0, 0), mode='RGB').convert('P')

    handle = ImageConverter.to_handle(image)

    assert tuple(handle[0, 0]) == (255, 0, 0, 255)


@pytest.mark.parametrize('value', [None, 'Square', 42, np.zeros((2, 2, 4), dtype=np.uint8)])
def test_to_handle_rejects_non_images(value):
    assert ImageConverter.to_handle(value) is None


def test_to_handle_rejects_empty_image():
    assert ImageConverter.to_handle(make_image(SQUARE_COLOR, size=(0, 3))) is None


def test_to_image():
    handle = ImageConverter.to_handle(make_image(POLYGON_COLOR, size=(4, 2)))

    image = ImageConverter.to_image(handle)

    assert isinstance(image, Image.Image)
    assert image.mode == 'RGBA'
    assert image.size == (4, 2)
    assert image.getpixel((3, 1)) == POLYGON_COLOR


def test_to_image_does_not_share_memory():
    handle = ImageConverter.to_handle(make_image(SQUARE_COLOR))

    image = ImageConverter.to_image(handle)
    image.putpixel((0, 0), (1, 2, 3, 4))

    assert tuple(handle[0, 0]) == SQUARE_COLOR


@pytest.mark.parametrize('handle', [
    None,
    make_image(SQUARE_COLOR),
    np.zeros((2, 2, 4), dtype=np.float32),
    np.zeros((2, 2, 3), dtype=np.uint8),
    np.zeros((2, 2), dtype=np.uint8),
    np.zeros((0, 2, 4), dtype=np.uint8),
])
def test_to_image_rejects_bad_handles(handle):
    assert ImageConverter.to_image(handle) is None
