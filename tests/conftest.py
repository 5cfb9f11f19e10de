"""
Shared fixtures for Overlay layer stack tests.

Provides small solid-colour images, an assets folder on disk populated with
them, and an AssetStore over that folder.
"""
import pytest

from overlay.services import AssetStore

from image_helpers import make_image, SQUARE_COLOR, TRIANGLE_COLOR, POLYGON_COLOR


@pytest.fixture
def square():
    return make_image(SQUARE_COLOR)


@pytest.fixture
def triangle():
    return make_image(TRIANGLE_COLOR)


@pytest.fixture
def polygon():
    return make_image(POLYGON_COLOR)


@pytest.fixture
def sample_images(square, triangle, polygon):
    """Three-layer index -> image mapping"""
    return {0: square, 1: triangle, 2: polygon}


@pytest.fixture
def assets_dir(tmp_path, square, triangle, polygon):
    """Assets folder holding Square.png, Triangle.png, Polygon.png and a broken file"""
    folder = tmp_path / 'assets'
    folder.mkdir()
    square.save(folder / 'Square.png')
    triangle.save(folder / 'Triangle.png')
    polygon.save(folder / 'Polygon.png')
    (folder / 'Broken.png').write_bytes(b'this is not a png file')
    return folder


@pytest.fixture
def store(assets_dir):
    """AssetStore over the sample assets folder"""
    return AssetStore(assets_dir)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep tests away from any real overlay.json or assets folder"""
    config_dir = tmp_path / 'config'
    config_dir.mkdir()
    monkeypatch.setenv('OVERLAY_CONFIG_DIR', str(config_dir))
    monkeypatch.delenv('OVERLAY_ASSETS_DIR', raising=False)
    return config_dir
