"""Package version module.

Installed: reads the version from the package metadata.
In frozen builds: uses _BAKED_VERSION written by the build script before PyInstaller runs.
"""

from importlib import metadata

# This line is overwritten by the build script before PyInstaller runs.
_BAKED_VERSION = None

_FALLBACK_VERSION = "0.0.0"


def get_version() -> str:
    """Get the package version string (e.g. '1.0.0')."""
    if _BAKED_VERSION is not None:
        return _BAKED_VERSION
    try:
        return metadata.version("overlay-layers")
    except metadata.PackageNotFoundError:
        # Running from a source checkout that was never installed
        return _FALLBACK_VERSION
