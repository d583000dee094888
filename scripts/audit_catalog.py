#!/usr/bin/env python3
"""
Catalog Audit

Reports CSV rows the site drops silently, duplicate IDs, products without
images and images hidden by a numbering gap.

Usage:
    python3 scripts/audit_catalog.py
    python3 scripts/audit_catalog.py --root catalog/ --strict
"""

import argparse
import logging
import os
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from dotenv import load_dotenv

from catalog_site.catalog import fetch_text, is_remote
from catalog_site.common.config_loader import load_settings
from catalog_site.common.errors import CatalogLoadError
from catalog_site.common.log_config import setup_logging
from catalog_site.images import load_manifest
from catalog_site.site import CatalogAudit

load_dotenv(Path(__file__).parent.parent / ".env")

logger = logging.getLogger("catalog_site.scripts.audit_catalog")


def resolve(root: str, source: str) -> str:
    return source if is_remote(source) else os.path.join(root, source)


def main():
    parser = argparse.ArgumentParser(description="Audit products.csv and the image manifest")
    parser.add_argument("--config", "-c", help="Catalog YAML config (default: config/catalog.yaml)")
    parser.add_argument("--root", "-r", default=".", help="Directory holding products.csv and images/")
    parser.add_argument("--no-images", action="store_true", help="Skip the image manifest checks")
    parser.add_argument("--strict", action="store_true", help="Exit with status 2 when issues are found")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose (debug) logging")

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    try:
        csv_text = fetch_text(resolve(args.root, settings.csv_source))
        manifest = None
        if not args.no_images and settings.images.manifest:
            manifest = load_manifest(resolve(args.root, settings.images.manifest))
    except CatalogLoadError as e:
        logger.error("%s (%s)", e, e.source)
        sys.exit(1)

    audit = CatalogAudit(settings.images)
    report = audit.run(csv_text, manifest=manifest)
    audit.print_report(report)

    if args.strict and report.has_problems:
        sys.exit(2)


if __name__ == "__main__":
    main()
