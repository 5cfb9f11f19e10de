"""Path resolver for handling differences between development and frozen executable environments.

This module provides utility functions to locate the assets folder and the
configuration file both when running from source and from a PyInstaller
frozen executable.
"""

import sys
import os
from pathlib import Path

from overlay.constants import (
    ASSETS_DIR_ENV, CONFIG_DIR_ENV, CONFIG_FILENAME, DEFAULT_ASSETS_DIRNAME
)


def get_base_dir() -> Path:
    """Get the base directory for the application.
    
    In frozen mode (PyInstaller executable), returns the directory containing the executable.
    In development mode, returns the project root directory (parent of src/).
    
    Returns:
        Path: Base directory path
    """
    if getattr(sys, 'frozen', False):
        return Path(os.path.dirname(sys.executable))
    else:
        # This file is in src/overlay/utils/
        return Path(__file__).resolve().parent.parent.parent.parent


def get_assets_dir() -> Path:
    """Get the directory holding named layer images.
    
    The OVERLAY_ASSETS_DIR environment variable wins when set.
    
    Returns:
        Path: Path to the assets folder
    """
    override = os.environ.get(ASSETS_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return get_base_dir() / DEFAULT_ASSETS_DIRNAME


def get_config_dir() -> Path:
    """Get the directory holding overlay.json.
    
    Returns:
        Path: OVERLAY_CONFIG_DIR if set, otherwise the base directory
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return get_base_dir()


def get_config_path() -> Path:
    """Get path to the JSON configuration file.
    
    Returns:
        Path: Full path to overlay.json
    """
    return get_config_dir() / CONFIG_FILENAME
