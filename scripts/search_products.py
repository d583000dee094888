#!/usr/bin/env python3
"""
Search the Catalog

Applies the listing filters from the command line and prints the matching
products, or exports them to CSV.

Usage:
    python3 scripts/search_products.py serum
    python3 scripts/search_products.py --category "Skin Care" --brand Nivea
    python3 scripts/search_products.py --list-options
    python3 scripts/search_products.py serum --output serums.csv
    python3 scripts/search_products.py --id 7
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
from catalog_site.common.csv_utils import write_csv
from catalog_site.common.log_config import setup_logging
from catalog_site.pages import ListingPage

load_dotenv(Path(__file__).parent.parent / ".env")

logger = logging.getLogger("catalog_site.scripts.search_products")


def main():
    parser = argparse.ArgumentParser(description="Filter catalog products from the command line")
    parser.add_argument("search", nargs="?", default="", help="Search term (name, brand, presentation)")
    parser.add_argument("--category", default="", help="Exact product type")
    parser.add_argument("--brand", default="", help="Exact brand")
    parser.add_argument("--id", dest="product_id", help="Show one product and its gallery")
    parser.add_argument("--list-options", action="store_true", help="Print category and brand options")
    parser.add_argument("--output", "-o", help="Write matching products to this CSV file")
    parser.add_argument("--config", "-c", help="Catalog YAML config (default: config/catalog.yaml)")
    parser.add_argument("--root", "-r", default=".", help="Directory holding products.csv and images/")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose (debug) logging")

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=not args.verbose)

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    with ListingPage(settings, root=args.root) as page:
        if not page.load():
            logger.error("%s (%s)", page.error, page.error.source)
            sys.exit(1)

        if args.list_options:
            print("Categories:")
            for category in page.store.categories:
                print(f"  {category}")
            print("Brands:")
            for brand in page.store.brands:
                print(f"  {brand}")
            return

        if args.product_id:
            product = page.store.find(args.product_id)
            if product is None:
                print(f"Product not found: {args.product_id}")
                sys.exit(1)
            print(f"{product.name} ({product.brand}) - {product.price}")
            print(f"  Type:         {product.product_type}")
            print(f"  Presentation: {product.presentation}")
            for index, url in enumerate(page.gallery_for(product)):
                print(f"  Image {index + 1}:      {url}")
            link = page.contact_link_for(product)
            if link:
                print(f"  Contact:      {link}")
            return

        products = page.visible_products(args.search, args.category, args.brand)

        if args.output:
            count = write_csv(args.output, [dict(p.record) for p in products])
            print(f"Wrote {count} products to {args.output}")
            return

        for product in products:
            print(f"{product.product_id:>6}  {product.name[:40]:<40}  {product.brand[:18]:<18}  {product.price}")
        print(f"\n{len(products)} of {len(page.store)} products")


if __name__ == "__main__":
    main()
