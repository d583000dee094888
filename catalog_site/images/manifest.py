"""
Image Manifest

images.json is a flat JSON array of the image filenames that exist, so
galleries can be resolved without probing each candidate URL.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional

import requests

from ..catalog.loader import fetch_text
from ..common.constants import DEFAULT_IMAGE_EXTENSIONS, MESSAGES
from ..common.errors import CatalogLoadError

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "images.json"


def parse_manifest(text: str, source: str = "") -> FrozenSet[str]:
    """
    Parse manifest JSON into a set of filenames.

    Raises:
        CatalogLoadError: If the text is not a JSON array of strings
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Invalid manifest JSON in %s: %s", source or "<text>", e)
        raise CatalogLoadError(MESSAGES["manifest_unavailable"], source=source) from e

    if not isinstance(data, list) or not all(isinstance(name, str) for name in data):
        logger.error("Manifest %s is not a list of filenames", source or "<text>")
        raise CatalogLoadError(MESSAGES["manifest_unavailable"], source=source)

    return frozenset(data)


def load_manifest(
    source: str | Path,
    session: Optional[requests.Session] = None,
) -> FrozenSet[str]:
    """
    Load images.json from a local path or URL.

    Args:
        source: Path or URL of the manifest
        session: Optional shared requests session

    Returns:
        Set of known image filenames

    Raises:
        CatalogLoadError: If the manifest cannot be fetched or parsed
    """
    text = fetch_text(source, session=session, error_message=MESSAGES["manifest_unavailable"])
    filenames = parse_manifest(text, source=str(source))
    logger.info("Loaded image manifest with %d files from %s", len(filenames), source)
    return filenames


def build_manifest(
    images_dir: str | Path,
    extensions: Iterable[str] = DEFAULT_IMAGE_EXTENSIONS,
) -> List[str]:
    """
    List image files in a directory for the manifest.

    Args:
        images_dir: Directory containing product images
        extensions: File extensions to include (without dot)

    Returns:
        Sorted filenames (not paths)
    """
    wanted = {ext.lstrip(".").lower() for ext in extensions}
    return sorted(
        path.name for path in Path(images_dir).iterdir()
        if path.is_file() and path.suffix.lstrip(".").lower() in wanted
    )


def write_manifest(
    images_dir: str | Path,
    output: Optional[str | Path] = None,
    extensions: Iterable[str] = DEFAULT_IMAGE_EXTENSIONS,
) -> Path:
    """
    Write images.json for a directory of images.

    Args:
        images_dir: Directory containing product images
        output: Manifest path (default: <images_dir>/images.json)
        extensions: File extensions to include

    Returns:
        Path of the written manifest
    """
    output_path = Path(output) if output else Path(images_dir) / MANIFEST_FILENAME
    filenames = build_manifest(images_dir, extensions)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(filenames, f, indent=2, ensure_ascii=False)
        f.write("\n")

    logger.info("Wrote %d filenames to %s", len(filenames), output_path)
    return output_path
