"""Named image lookup over an assets folder.

Identifiers are file names relative to the assets folder, with or without
an extension:

    store = AssetStore(get_assets_dir())
    image = store.load_image("Square")      # Square.png, Square.jpg, ...
    image = store.load_image("Square.png")  # exact file
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from PIL import Image

from overlay.constants import SUPPORTED_EXTENSIONS


class AssetStore:
    """Loads images by name from a single folder
    
    load_image returns None when nothing matches the name. A file that
    exists but cannot be decoded raises OSError (PIL.UnidentifiedImageError
    is a subclass).
    """
    
    def __init__(self, root: Union[str, Path], extensions: Sequence[str] = SUPPORTED_EXTENSIONS):
        """Initialize store
        
        Args:
            root: Folder containing the images
            extensions: Extensions tried in order for names without one
        """
        self._root = Path(root)
        self._extensions = tuple(ext.lower() for ext in extensions)
        self._logger = logging.getLogger('AssetStore')
    
    @property
    def root(self) -> Path:
        return self._root
    
    @property
    def extensions(self) -> tuple:
        return self._extensions
    
    def __repr__(self) -> str:
        return f"AssetStore({str(self._root)!r})"
    
    def find(self, identifier: str) -> Optional[Path]:
        """Resolve an identifier to an image file
        
        Args:
            identifier: Image name, optionally with extension
            
        Returns:
            Path to the file, or None if no file matches or the name
            points outside the assets folder
        """
        if not identifier or not isinstance(identifier, str):
            return None
        
        relative = Path(identifier)
        if relative.is_absolute() or '..' in relative.parts:
            self._logger.debug(f"Rejected identifier outside assets folder: {identifier}")
            return None
        
        candidate = self._root / relative
        if candidate.suffix.lower() in self._extensions and candidate.is_file():
            return candidate
        
        for ext in self._extensions:
            candidate = self._root / f"{identifier}{ext}"
            if candidate.is_file():
                return candidate
        
        return None
    
    def load_image(self, identifier: str) -> Optional[Image.Image]:
        """Load a named image
        
        Args:
            identifier: Image name, optionally with extension
            
        Returns:
            Decoded PIL image, or None if not found
            
        Raises:
            OSError: If the file exists but cannot be decoded
        """
        path = self.find(identifier)
        if path is None:
            self._logger.debug(f"Image not found: {identifier}")
            return None
        
        with Image.open(path) as img:
            img.load()
            # Detach from the file handle so it can be closed here
            image = img.copy()
        
        self._logger.debug(f"Loaded {identifier} from {path} ({image.width}x{image.height} {image.mode})")
        return image
    
    def names(self) -> List[str]:
        """List identifiers (file stems) of every image in the folder"""
        if not self._root.is_dir():
            return []
        return sorted({
            path.stem for path in self._root.iterdir()
            if path.is_file() and path.suffix.lower() in self._extensions
        })
