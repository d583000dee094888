#!/usr/bin/env python3
"""
Build the Static Catalog Site

Renders index.html, one product-{id}.html per product and the client
assets into an output directory. Images are copied when the image base
is a local directory.

Usage:
    python3 scripts/build_site.py
    python3 scripts/build_site.py --root catalog/ --output dist/
    python3 scripts/build_site.py --config config/catalog.yaml --no-copy-images
    python3 scripts/build_site.py --output dist/ --log-file build.log
"""

import argparse
import logging
import os
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from dotenv import load_dotenv

from catalog_site.common.config_loader import load_settings
from catalog_site.common.log_config import setup_logging
from catalog_site.site import StaticSiteBuilder

load_dotenv(Path(__file__).parent.parent / ".env")

logger = logging.getLogger("catalog_site.scripts.build_site")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build the static product catalog site")
    parser.add_argument(
        "--config", "-c",
        help="Catalog YAML config (default: config/catalog.yaml)"
    )
    parser.add_argument(
        "--root", "-r",
        default=".",
        help="Directory holding products.csv and images/ (default: current directory)"
    )
    parser.add_argument(
        "--output", "-o",
        default="dist",
        help="Output directory (default: dist)"
    )
    parser.add_argument(
        "--no-copy-images",
        action="store_true",
        help="Do not copy local images into the output directory"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress info messages, show only warnings and errors"
    )
    parser.add_argument(
        "--log-file",
        help="Also write log records to this file"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    builder = StaticSiteBuilder(
        settings,
        source_root=args.root,
        output_dir=args.output,
        copy_images=not args.no_copy_images,
    )
    result = builder.build()

    print("=" * 60)
    print("Catalog Build")
    print("=" * 60)
    print(f"  Store:            {settings.store_name}")
    print(f"  CSV source:       {settings.csv_source}")
    print(f"  Image strategy:   {settings.images.strategy}")
    print(f"  Output:           {result.output_dir}")
    print(f"  Product pages:    {result.products}")
    print(f"  Without images:   {result.placeholders}")
    print("=" * 60)

    if not result.ok:
        logger.error("Build failed: %s", result.error)
        sys.exit(1)


if __name__ == "__main__":
    main()
