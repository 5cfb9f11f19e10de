"""Image conversion between Pillow images and layer handles.

A layer handle is the internal, read-only representation of one layer:
a (height, width, 4) uint8 RGBA numpy array. Pillow images are what callers
pass in and get back.

Both directions return None instead of raising when the input cannot be
converted, so callers decide whether that is an error.
"""

import logging
from typing import Optional

import numpy as np
from PIL import Image

from overlay.constants import INTERNAL_IMAGE_MODE, INTERNAL_CHANNELS


logger = logging.getLogger(__name__)


class ImageConverter:
    """Utility for converting images to and from layer handles."""
    
    @staticmethod
    def to_handle(image) -> Optional[np.ndarray]:
        """Convert a Pillow image to a layer handle.
        
        Args:
            image: PIL.Image.Image in any mode
            
        Returns:
            np.ndarray: Read-only (H, W, 4) uint8 array, or None if the
            image is not a Pillow image, is empty, or fails to convert
        """
        if not isinstance(image, Image.Image):
            return None
        if image.width == 0 or image.height == 0:
            return None
        
        try:
            rgba = image if image.mode == INTERNAL_IMAGE_MODE else image.convert(INTERNAL_IMAGE_MODE)
            handle = np.array(rgba, dtype=np.uint8)
        except (OSError, ValueError) as e:
            logger.debug(f"Image conversion failed: {e}")
            return None
        
        handle.flags.writeable = False
        return handle
    
    @staticmethod
    def to_image(handle) -> Optional[Image.Image]:
        """Convert a layer handle back to a Pillow image.
        
        Args:
            handle: (H, W, 4) uint8 array
            
        Returns:
            PIL.Image.Image: New RGBA image, or None if the handle has the
            wrong type, dtype, or shape
        """
        if not isinstance(handle, np.ndarray):
            return None
        if handle.dtype != np.uint8 or handle.ndim != 3 or handle.shape[2] != INTERNAL_CHANNELS:
            return None
        if handle.shape[0] == 0 or handle.shape[1] == 0:
            return None
        
        try:
            return Image.fromarray(handle.copy())
        except (TypeError, ValueError) as e:
            logger.debug(f"Handle conversion failed: {e}")
            return None
