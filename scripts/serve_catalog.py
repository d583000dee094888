#!/usr/bin/env python3
"""
Catalog Preview Server

Serves the catalog from products.csv on every request, so CSV and image
edits show up on reload. Filtering runs server-side.

Usage:
    python3 scripts/serve_catalog.py
    python3 scripts/serve_catalog.py --port 8080 --root catalog/
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
from catalog_site.site import serve

load_dotenv(Path(__file__).parent.parent / ".env")

logger = logging.getLogger("catalog_site.scripts.serve_catalog")


def main():
    parser = argparse.ArgumentParser(description="Serve the product catalog locally")
    parser.add_argument("--config", "-c", help="Catalog YAML config (default: config/catalog.yaml)")
    parser.add_argument("--root", "-r", default=".", help="Directory holding products.csv and images/")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    parser.add_argument("--port", "-p", type=int, default=8000, help="Port (default: 8000)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose (debug) logging")

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    print(f"Serving {settings.store_name} at http://{args.host}:{args.port}/  (Ctrl+C to stop)")
    serve(settings, root=args.root, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
