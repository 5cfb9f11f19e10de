"""Configuration loading for overlay tools"""

import os
import json
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional, Union

from overlay.constants import DEFAULT_CONFIG, CONFIG_KEY_ASSETS_DIR, CONFIG_KEY_EXTENSIONS
from overlay.utils.logger import loggerRaise
from overlay.utils.path_resolver import get_assets_dir, get_config_path


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Load settings from a JSON config file merged over the defaults
    
    Args:
        path: Config file path (default: path_resolver.get_config_path())
        
    Returns:
        Dict with every key of DEFAULT_CONFIG. A missing file yields the defaults.
    """
    config = deepcopy(DEFAULT_CONFIG)
    config_file = Path(path) if path is not None else get_config_path()

    try:
        if os.path.exists(config_file):
            with open(config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"Config file must contain a JSON object: {config_file}")
            for key in config:
                if key in data:
                    config[key] = data[key]
        _validate(config, config_file)
    except (OSError, ValueError) as e:
        loggerRaise(e, f"Error loading config from {config_file}")

    extensions = (ext.lower() for ext in config[CONFIG_KEY_EXTENSIONS])
    config[CONFIG_KEY_EXTENSIONS] = tuple(
        ext if ext.startswith('.') else f'.{ext}' for ext in extensions
    )
    return config


def _validate(config: Dict[str, Any], config_file: Path):
    """Check value types of a merged config

    Raises:
        ValueError: If assets_dir is not a string or null, or extensions
            is not a list of non-empty strings
    """
    assets_dir = config[CONFIG_KEY_ASSETS_DIR]
    if assets_dir is not None and not isinstance(assets_dir, str):
        raise ValueError(f"'{CONFIG_KEY_ASSETS_DIR}' must be a string or null in {config_file}")

    extensions = config[CONFIG_KEY_EXTENSIONS]
    if not isinstance(extensions, (list, tuple)) or \
            not all(isinstance(ext, str) and ext.strip('.') for ext in extensions):
        raise ValueError(f"'{CONFIG_KEY_EXTENSIONS}' must be a list of extension strings in {config_file}")


def resolve_assets_dir(config: Dict[str, Any]) -> Path:
    """Get the assets folder named by a loaded config

    Relative paths are taken relative to the current working directory.
    """
    assets_dir = config.get(CONFIG_KEY_ASSETS_DIR)
    if assets_dir:
        return Path(assets_dir).expanduser()
    return get_assets_dir()
