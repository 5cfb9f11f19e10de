"""
Overlay - Error Types

Every failure the layer stack reports is an OverlayError carrying a short
error code and, when one is known, the name of the image that caused it.

Codes:
    invalid_dictionary  - layer indices are not contiguous from 0
    image_not_found     - the asset store has no image with that name
    invalid_image       - the image could not be decoded or converted
"""

from typing import Optional


INVALID_DICTIONARY = 'invalid_dictionary'
IMAGE_NOT_FOUND = 'image_not_found'
INVALID_IMAGE = 'invalid_image'


class OverlayError(Exception):
    """Base class for all layer stack errors

    Attributes:
        code: Short machine-readable error code
        image_name: Identifier of the offending image, if known
    """

    code = 'overlay_error'
    default_message = 'Overlay error'

    def __init__(self, message: Optional[str] = None, image_name: Optional[str] = None):
        self.image_name = image_name
        if message is None:
            message = self.default_message
            if image_name:
                message = f"{message}: '{image_name}'"
        super().__init__(message)


class InvalidLayerOrderingError(OverlayError):
    """Layer indices must run 0, 1, ..., n-1 with no gaps"""

    code = INVALID_DICTIONARY
    default_message = 'Layer indices must be contiguous and start at 0'


class ImageNotFoundError(OverlayError):
    """The named image does not exist in the asset store"""

    code = IMAGE_NOT_FOUND
    default_message = 'Image not found'

    def __init__(self, image_name: str, message: Optional[str] = None):
        super().__init__(message, image_name=image_name)


class InvalidImageError(OverlayError):
    """The image could not be decoded or converted to a layer handle"""

    code = INVALID_IMAGE
    default_message = 'Invalid image'

    def __init__(self, image_name: Optional[str] = None, message: Optional[str] = None):
        super().__init__(message, image_name=image_name)
