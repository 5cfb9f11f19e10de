"""
Overlay - Layer Stack Data Model

An ordered stack of images ("layers") addressed by contiguous integer
indices, starting at 0. Higher index = rendered on top. The stack is the
input to an external compositing step.

This class handles:
- Validating index -> image mappings (indices must be 0..n-1, no gaps)
- Building a stack from named assets or from Pillow images
- Lookup by index
- Appending a new top layer
- Removing a layer and shifting every layer above it down by one

The stack is a plain synchronous data structure. It does no locking; callers
that share an instance between threads must serialize access themselves.

Usage:
    # From named assets
    layers = LayerStack.from_names({0: "Background Image", 1: "Overlay Image"})

    # From Pillow images
    layers = LayerStack.from_images({0: square, 1: triangle, 2: polygon})
    layers.remove_layer(0)
    top = layers.layer(layers.count - 1)
"""

import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional

import numpy as np
from PIL import Image

from overlay.constants import CONFIG_KEY_EXTENSIONS
from overlay.errors import InvalidLayerOrderingError, ImageNotFoundError, InvalidImageError
from overlay.services.asset_store import AssetStore
from overlay.services.image_converter import ImageConverter
from overlay.utils.config import load_config, resolve_assets_dir


class LayerStack:
    """Ordered collection of layer images with dense indices

    Layers are kept in a list, so the occupied indices are always exactly
    range(count). Every public operation preserves that.

    Subclasses may replace `converter` with any object exposing
    to_handle(image) and to_image(handle).
    """

    converter = ImageConverter

    def __init__(self):
        """Create an empty stack"""
        self._handles: List[np.ndarray] = []
        self._logger = logging.getLogger('LayerStack')

    # ========================================
    # Construction
    # ========================================

    @classmethod
    def from_names(cls, names: Mapping[int, str], store: Optional[AssetStore] = None) -> 'LayerStack':
        """Create a stack from images in an asset store

        Args:
            names: Layer index -> image identifier
            store: Asset store to load from (default: configured assets folder)

        Returns:
            New LayerStack with len(names) layers

        Raises:
            InvalidLayerOrderingError: If indices are not 0..n-1
            ImageNotFoundError: If an identifier has no matching image
            InvalidImageError: If an image cannot be decoded or converted
        """
        if not cls.is_layer_dictionary(names):
            raise InvalidLayerOrderingError()

        if store is None:
            store = cls._default_store()

        handles = cls._resolve(names, lambda name: cls._load_named(store, name))
        return cls._from_handles(handles)

    @classmethod
    def from_images(cls, images: Mapping[int, Image.Image]) -> 'LayerStack':
        """Create a stack from Pillow images

        Args:
            images: Layer index -> image

        Returns:
            New LayerStack with len(images) layers

        Raises:
            InvalidLayerOrderingError: If indices are not 0..n-1
            InvalidImageError: If an image cannot be converted
        """
        if not cls.is_layer_dictionary(images):
            raise InvalidLayerOrderingError()

        handles = cls._resolve(images, cls._convert_image)
        return cls._from_handles(handles)

    @staticmethod
    def _resolve(sources: Mapping[int, Any], resolve) -> List[np.ndarray]:
        """Resolve every source into a scratch list indexed by layer

        Any failure propagates before a stack exists, so a partially
        built stack is never observable.
        """
        return [resolve(sources[index]) for index in range(len(sources))]

    @classmethod
    def _from_handles(cls, handles: List[np.ndarray]) -> 'LayerStack':
        stack = cls()
        stack._handles = handles
        stack._logger.debug(f"Created stack with {len(handles)} layers")
        return stack

    @classmethod
    def _load_named(cls, store: AssetStore, name: str) -> np.ndarray:
        try:
            image = store.load_image(name)
        except OSError as e:
            raise InvalidImageError(name) from e
        if image is None:
            raise ImageNotFoundError(name)

        handle = cls.converter.to_handle(image)
        if handle is None:
            raise InvalidImageError(name)
        return handle

    @classmethod
    def _convert_image(cls, image: Image.Image) -> np.ndarray:
        handle = cls.converter.to_handle(image)
        if handle is None:
            raise InvalidImageError()
        return handle

    @staticmethod
    def _default_store() -> AssetStore:
        config = load_config()
        return AssetStore(resolve_assets_dir(config), config[CONFIG_KEY_EXTENSIONS])

    # ========================================
    # Layer Operations
    # ========================================

    @property
    def count(self) -> int:
        """Number of layers"""
        return len(self._handles)

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[Optional[Image.Image]]:
        """Iterate over layers bottom to top as Pillow images"""
        for index in range(len(self._handles)):
            yield self.layer(index)

    def __repr__(self) -> str:
        return f"LayerStack({len(self._handles)} layers)"

    def has_layer(self, index) -> bool:
        """Check whether index is an occupied layer index"""
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            return False
        return 0 <= index < len(self._handles)

    def indices(self) -> range:
        """Occupied layer indices, always 0..count-1"""
        return range(len(self._handles))

    def layer(self, index: int) -> Optional[Image.Image]:
        """Get the specified layer

        Args:
            index: Layer index

        Returns:
            New Pillow image for the layer. None if the layer does not
            exist or its handle cannot be converted back.
        """
        if not self.has_layer(index):
            return None

        image = self.converter.to_image(self._handles[index])
        if image is None:
            self._logger.warning(f"Layer {index} could not be converted back to an image")
        return image

    def append_layer(self, image: Image.Image) -> int:
        """Add an image as the new top layer

        Args:
            image: Pillow image

        Returns:
            Index of the new layer (the previous count)

        Raises:
            InvalidImageError: If the image cannot be converted. The
                stack is unchanged.
        """
        handle = self._convert_image(image)
        index = len(self._handles)
        self._handles.append(handle)
        self._logger.debug(f"Appended layer {index}")
        return index

    def remove_layer(self, index: int) -> None:
        """Remove a layer; layers above it move down by one

        Does nothing if index is not an occupied layer index.

        Args:
            index: Layer index
        """
        if not self.has_layer(index):
            self._logger.debug(f"remove_layer({index}): no such layer")
            return

        self._handles.pop(index)
        self._logger.debug(f"Removed layer {index}, {len(self._handles)} remaining")

    def to_dict(self) -> Dict[int, Optional[Image.Image]]:
        """Export layers as an index -> Pillow image mapping

        Layers whose handle cannot be converted back map to None. Only a
        result without None values can be passed back to from_images.
        """
        return {index: self.layer(index) for index in self.indices()}

    # ========================================
    # Helpers
    # ========================================

    @staticmethod
    def is_layer_dictionary(mapping: Mapping[int, Any]) -> bool:
        """Validate a layer mapping

        Args:
            mapping: Layer index -> anything

        Returns:
            True if the keys are exactly 0..len(mapping)-1. An empty
            mapping is valid.
        """
        return all(index in mapping for index in range(len(mapping)))
