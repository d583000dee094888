"""
Catalog Loader

Fetches the products CSV (local path or http(s) URL) and turns it into
Product objects. Any failure to obtain the text is raised as
CatalogLoadError; malformed rows are dropped by the parser.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import requests

from ..common.constants import MESSAGES, USER_AGENT
from ..common.csv_utils import parse_csv, read_csv_text
from ..common.errors import CatalogLoadError
from ..models import Product

logger = logging.getLogger(__name__)


def is_remote(source: str | Path) -> bool:
    """Return True if source is an http(s) URL."""
    return str(source).lower().startswith(("http://", "https://"))


def create_session() -> requests.Session:
    """Create a requests session with the catalog User-Agent."""
    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT})
    return session


def fetch_text(
    source: str | Path,
    session: Optional[requests.Session] = None,
    error_message: str = MESSAGES["csv_unavailable"],
    timeout: Optional[float] = 30,
) -> str:
    """
    Fetch a text asset from a local path or a URL.

    Args:
        source: Local file path or http(s) URL
        session: Optional shared requests session
        error_message: Human-readable message for CatalogLoadError
        timeout: Request timeout in seconds (remote sources only)

    Returns:
        The asset text

    Raises:
        CatalogLoadError: File missing/unreadable, network error or non-success status
    """
    if not is_remote(source):
        try:
            return read_csv_text(source)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Could not read %s: %s", source, e)
            raise CatalogLoadError(error_message, source=str(source)) from e

    http = session or create_session()
    try:
        response = http.get(str(source), timeout=timeout)
        if not response.ok:
            logger.error("HTTP %d fetching %s", response.status_code, source)
            raise CatalogLoadError(error_message, source=str(source))
        response.encoding = response.encoding or "utf-8"
        return response.text
    except requests.exceptions.RequestException as e:
        logger.error("Request failed for %s: %s", source, e)
        raise CatalogLoadError(error_message, source=str(source)) from e
    finally:
        if session is None:
            http.close()


def load_products(
    source: str | Path,
    session: Optional[requests.Session] = None,
) -> List[Product]:
    """
    Load and parse the products CSV.

    Args:
        source: Local path or URL of products.csv
        session: Optional shared requests session

    Returns:
        Products in CSV order
    """
    text = fetch_text(source, session=session)
    products = [Product.from_record(record) for record in parse_csv(text)]
    logger.info("Loaded %d products from %s", len(products), source)
    return products
