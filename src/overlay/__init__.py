"""
Overlay - layered image stacks for compositing

Images are held in a LayerStack, addressed by contiguous layer indices
starting at 0 (higher index = on top):

    from overlay import LayerStack

    layers = LayerStack.from_names({0: "Background Image", 1: "Overlay Image"})
    layers.remove_layer(0)
    image = layers.layer(0)
"""

from .errors import OverlayError, InvalidLayerOrderingError, ImageNotFoundError, InvalidImageError
from .models import LayerStack
from .services import AssetStore, ImageConverter
from .version import get_version

__all__ = [
    'LayerStack',
    'AssetStore',
    'ImageConverter',
    'OverlayError',
    'InvalidLayerOrderingError',
    'ImageNotFoundError',
    'InvalidImageError',
    'get_version',
]
