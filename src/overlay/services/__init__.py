"""Image services: named asset loading and layer handle conversion."""

from .asset_store import AssetStore
from .image_converter import ImageConverter

__all__ = [
    'AssetStore',
    'ImageConverter',
]
