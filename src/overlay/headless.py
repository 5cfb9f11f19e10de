"""Headless layer export - CLI entry point.

Reads a JSON manifest mapping layer indices to asset names, builds a layer
stack from the assets folder, optionally removes layers, and writes every
remaining layer to a PNG named after its (compacted) index.

Manifest example:
    {"0": "Square", "1": "Triangle", "2": "Polygon"}

Usage:
    overlay-headless <manifest> [-a ASSETS_DIR] [-r INDEX ...] [-o OUTPUT_DIR] [-c CONFIG] [-v]

Examples:
    overlay-headless layers.json -a assets/
    overlay-headless layers.json -r 0 -o renders/
"""

import sys
import os
import json
import argparse
import logging
from typing import Dict, List, Optional

from overlay.constants import CONFIG_KEY_EXTENSIONS, DEFAULT_OUTPUT_DIR, LAYER_FILENAME_TEMPLATE
from overlay.errors import OverlayError, InvalidLayerOrderingError
from overlay.models import LayerStack
from overlay.services import AssetStore
from overlay.utils.config import load_config, resolve_assets_dir
from overlay.utils.logger import setup_logging
from overlay.version import get_version

logger = logging.getLogger(__name__)


def _unique_keys(pairs):
    """JSON object hook that rejects repeated keys"""
    data = {}
    for key, value in pairs:
        if key in data:
            raise InvalidLayerOrderingError(f"Layer index appears more than once: {key!r}")
        data[key] = value
    return data


def parse_manifest(text: str) -> Dict[int, str]:
    """Parse a manifest JSON document.

    JSON object keys are always strings, so each key must be a layer index
    written in canonical decimal form ("1", not "01", "+1" or " 1").

    Args:
        text: Manifest file contents.

    Returns:
        Dict mapping layer index -> asset name.

    Raises:
        ValueError: If the text is not a JSON object.
        InvalidLayerOrderingError: If a key is not a canonical decimal
            integer or an index appears more than once.
    """
    data = json.loads(text, object_pairs_hook=_unique_keys)
    if not isinstance(data, dict):
        raise ValueError("Manifest must be a JSON object of index -> image name")

    manifest = {}
    for key, name in data.items():
        try:
            index = int(key)
        except ValueError:
            raise InvalidLayerOrderingError(f"Layer index is not an integer: {key!r}")
        if str(index) != key:
            raise InvalidLayerOrderingError(f"Layer index is not in canonical form: {key!r}")
        if index in manifest:
            raise InvalidLayerOrderingError(f"Layer index appears more than once: {index}")
        manifest[index] = name
    return manifest


def export_layers(stack: LayerStack, output_dir: str) -> List[str]:
    """Write every layer of a stack to PNG files.

    Args:
        stack: Layer stack to export.
        output_dir: Destination folder (created if missing).

    Returns:
        Paths of the written files, in layer order.
    """
    os.makedirs(output_dir, exist_ok=True)

    written = []
    for index, image in enumerate(stack):
        if image is None:
            logger.warning(f"Skipping layer {index}: no image")
            continue
        out_file = os.path.join(output_dir, LAYER_FILENAME_TEMPLATE.format(index=index))
        image.save(out_file, format='PNG')
        written.append(out_file)
        logger.debug(f"Wrote {out_file}")
    return written


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='overlay-headless',
        description='Build a layer stack from named images and export each layer to PNG.',
    )
    parser.add_argument(
        'manifest',
        help='Path to JSON manifest mapping layer index to image name.',
    )
    parser.add_argument(
        '-a', '--assets',
        default=None,
        help='Folder containing the named images (default: from config).',
    )
    parser.add_argument(
        '-r', '--remove',
        type=int,
        action='append',
        default=[],
        metavar='INDEX',
        help='Remove the layer at INDEX after loading. Repeatable; applied in order.',
    )
    parser.add_argument(
        '-o', '--output',
        default=DEFAULT_OUTPUT_DIR,
        help=f'Output directory for PNG files (default: {DEFAULT_OUTPUT_DIR}).',
    )
    parser.add_argument(
        '-c', '--config',
        default=None,
        help='Path to overlay.json config file.',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {get_version()}',
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)

    manifest_path = os.path.abspath(args.manifest)
    output_dir = os.path.abspath(args.output)

    if not os.path.isfile(manifest_path):
        print(f"Error: Manifest not found: {manifest_path}")
        return 1

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"Error: Could not load config: {e}")
        return 1

    assets_dir = args.assets if args.assets else resolve_assets_dir(config)
    store = AssetStore(assets_dir, config[CONFIG_KEY_EXTENSIONS])

    try:
        with open(manifest_path, 'r', encoding='utf-8-sig') as f:
            manifest = parse_manifest(f.read())
        stack = LayerStack.from_names(manifest, store=store)
    except OverlayError as e:
        print(f"Error: {e}")
        return 1
    except ValueError as e:
        print(f"Error: Invalid manifest {manifest_path}: {e}")
        return 1

    for index in args.remove:
        if not stack.has_layer(index):
            print(f"  [SKIP] No layer {index} to remove")
        stack.remove_layer(index)

    try:
        written = export_layers(stack, output_dir)
    except OSError as e:
        print(f"Error: Could not export layers to {output_dir}: {e}")
        return 1
    for out_file in written:
        print(f"  {os.path.basename(out_file)}")

    print(f"\nDone. Exported {len(written)} of {stack.count} layer(s) to {output_dir}/")
    return 0


if __name__ == '__main__':
    sys.exit(main())
