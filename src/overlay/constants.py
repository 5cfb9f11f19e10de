"""
Overlay - Constants and Configuration Defaults

This module contains the constant values used throughout the package:
- Asset lookup (supported file extensions, default directory names)
- Internal image representation
- Configuration keys and defaults
- Export naming
"""

# ======================================================================
# ASSET LOOKUP
# ======================================================================
# Extensions tried, in order, when an identifier has no extension
SUPPORTED_EXTENSIONS = ('.png', '.jpg', '.jpeg', '.bmp', '.gif', '.tif', '.tiff', '.webp')

# Assets folder next to the executable / project root
DEFAULT_ASSETS_DIRNAME = 'assets'

# Environment variable that overrides the assets folder
ASSETS_DIR_ENV = 'OVERLAY_ASSETS_DIR'

# ======================================================================
# INTERNAL IMAGE REPRESENTATION
# ======================================================================
# Layer handles are (height, width, 4) uint8 arrays in this mode
INTERNAL_IMAGE_MODE = 'RGBA'
INTERNAL_CHANNELS = 4

# ======================================================================
# CONFIGURATION
# ======================================================================
CONFIG_FILENAME = 'overlay.json'
CONFIG_DIR_ENV = 'OVERLAY_CONFIG_DIR'

CONFIG_KEY_ASSETS_DIR = 'assets_dir'
CONFIG_KEY_EXTENSIONS = 'extensions'

# assets_dir of None means "resolve with path_resolver.get_assets_dir()"
DEFAULT_CONFIG = {
    CONFIG_KEY_ASSETS_DIR: None,
    CONFIG_KEY_EXTENSIONS: list(SUPPORTED_EXTENSIONS),
}

# ======================================================================
# EXPORT
# ======================================================================
LAYER_FILENAME_TEMPLATE = 'layer_{index}.png'
DEFAULT_OUTPUT_DIR = './output'
