#!/usr/bin/env python3
"""
Generate images.json

Lists the product images in a directory so the site can resolve galleries
without probing every candidate URL. Re-run after adding or renaming images.

Usage:
    python3 scripts/generate_manifest.py images/
    python3 scripts/generate_manifest.py images/ --ext webp --ext jpg
    python3 scripts/generate_manifest.py images/ --output public/images.json
"""

import argparse
import logging
import os
import sys

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from catalog_site.common.constants import DEFAULT_IMAGE_EXTENSIONS
from catalog_site.common.log_config import setup_logging
from catalog_site.images import write_manifest

logger = logging.getLogger("catalog_site.scripts.generate_manifest")


def main():
    parser = argparse.ArgumentParser(description="Write images.json for a directory of product images")
    parser.add_argument("images_dir", help="Directory containing product images")
    parser.add_argument("--output", "-o", help="Manifest path (default: <images_dir>/images.json)")
    parser.add_argument(
        "--ext",
        action="append",
        dest="extensions",
        help=f"Image extension to include, repeatable (default: {', '.join(DEFAULT_IMAGE_EXTENSIONS)})"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose (debug) logging")

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    if not os.path.isdir(args.images_dir):
        logger.error("Not a directory: %s", args.images_dir)
        sys.exit(1)

    path = write_manifest(
        args.images_dir,
        output=args.output,
        extensions=args.extensions or DEFAULT_IMAGE_EXTENSIONS,
    )
    print(f"Manifest written: {path}")


if __name__ == "__main__":
    main()
