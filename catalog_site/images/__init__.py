"""
Product image resolution.

Modules:
    manifest - Load, build and write images.json
    resolver - Manifest and probe gallery resolvers
"""

from pathlib import Path
from typing import Iterable, Optional

import requests

from ..common.config_loader import ImageSettings
from .manifest import build_manifest, load_manifest, parse_manifest, write_manifest
from .resolver import (
    ImageProber,
    ImageResolver,
    ManifestImageResolver,
    ProbeImageResolver,
)

# Strategy name to resolver mapping
RESOLVERS = {
    'manifest': ManifestImageResolver,
    'probe': ProbeImageResolver,
}


def get_resolver(
    settings: ImageSettings,
    manifest: Optional[Iterable[str]] = None,
    session: Optional[requests.Session] = None,
    root: str | Path = ".",
) -> ImageResolver:
    """
    Create the resolver selected by settings.strategy.

    Args:
        settings: Image settings
        manifest: Known filenames (required for the manifest strategy)
        session: Shared requests session for probing
        root: Directory local image paths are relative to

    Returns:
        Configured ImageResolver

    Raises:
        ValueError: If the strategy is unknown or the manifest is missing
    """
    if settings.strategy not in RESOLVERS:
        raise ValueError(
            f"Unsupported image strategy: {settings.strategy}. "
            f"Supported: {', '.join(RESOLVERS.keys())}"
        )

    if settings.strategy == 'manifest':
        if manifest is None:
            raise ValueError("The manifest strategy needs a loaded manifest")
        return ManifestImageResolver(manifest, settings)

    prober = ImageProber(session=session, timeout=settings.probe_timeout, root=root)
    return ProbeImageResolver(prober, settings)


__all__ = [
    'ImageProber',
    'ImageResolver',
    'ManifestImageResolver',
    'ProbeImageResolver',
    'RESOLVERS',
    'build_manifest',
    'get_resolver',
    'load_manifest',
    'parse_manifest',
    'write_manifest',
]
