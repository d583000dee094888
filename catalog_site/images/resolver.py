"""
Image Resolver

Turns a product ID into its gallery. Images follow the naming convention

    {id}.{ext}        main image
    {id}-{n}.{ext}    additional images, n = 1, 2, ... (no gaps)

Additional images are only recognised while the indices are contiguous:
the first missing index ends discovery, even if later files exist. A
product without a main image gets the placeholder gallery.

Two strategies share that rule:
- ManifestImageResolver looks filenames up in images.json
- ProbeImageResolver checks each candidate URL (HEAD request or file check)
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Tuple

import requests

from ..catalog.loader import create_session, is_remote
from ..common.config_loader import ImageSettings
from ..models import Gallery

logger = logging.getLogger(__name__)


class ImageResolver:
    """
    Base class: candidate naming and the sequential-prefix rule.

    Subclasses implement find_slot(), returning the URL of the first
    existing candidate for one slot, or None.
    """

    def __init__(self, settings: Optional[ImageSettings] = None):
        self.settings = settings or ImageSettings()

    @property
    def placeholder(self) -> str:
        return self.settings.placeholder

    @property
    def additional_indices(self) -> range:
        start = self.settings.first_additional_index
        return range(start, start + self.settings.max_additional)

    def slot_basename(self, product_id: str, index: Optional[int] = None) -> str:
        """Base filename (no extension) for the main slot or additional slot `index`."""
        return product_id if index is None else f"{product_id}-{index}"

    def slot_filenames(self, product_id: str, index: Optional[int] = None) -> List[str]:
        """Candidate filenames for one slot, in extension order."""
        base = self.slot_basename(product_id, index)
        return [f"{base}.{ext}" for ext in self.settings.extensions]

    def url_for(self, filename: str) -> str:
        return f"{self.settings.base_path}{filename}"

    def find_slot(self, product_id: str, index: Optional[int] = None) -> Optional[str]:
        raise NotImplementedError

    def close(self) -> None:
        """Release resources held by the resolver."""

    def find_additional(self, product_id: str) -> List[Tuple[int, Optional[str]]]:
        """Return (index, url or None) for the additional slots, in index order."""
        found = []
        for index in self.additional_indices:
            url = self.find_slot(product_id, index)
            found.append((index, url))
            if url is None:
                break
        return found

    def resolve(self, product_id: str) -> Gallery:
        """
        Resolve the gallery for a product.

        Args:
            product_id: Product ID from the CSV

        Returns:
            Gallery with the main image first, or the placeholder gallery
        """
        product_id = (product_id or "").strip()
        if not product_id:
            return Gallery.placeholder(self.placeholder)

        main = self.find_slot(product_id)
        if main is None:
            logger.debug("No main image for product %s, using placeholder", product_id)
            return Gallery.placeholder(self.placeholder)

        images = [main]
        for _index, url in sorted(self.find_additional(product_id), key=lambda item: item[0]):
            if url is None:
                break
            images.append(url)

        logger.debug("Resolved %d images for product %s", len(images), product_id)
        return Gallery(images=tuple(images))


class ManifestImageResolver(ImageResolver):
    """
    Resolve galleries from a set of known filenames.

    Usage:
        resolver = ManifestImageResolver({"7.webp", "7-1.webp", "7-3.webp"})
        resolver.resolve("7").images  # ('images/7.webp', 'images/7-1.webp')
    """

    def __init__(self, manifest: Iterable[str], settings: Optional[ImageSettings] = None):
        super().__init__(settings)
        self.manifest: FrozenSet[str] = frozenset(manifest)

    def find_slot(self, product_id: str, index: Optional[int] = None) -> Optional[str]:
        for filename in self.slot_filenames(product_id, index):
            if filename in self.manifest:
                return self.url_for(filename)
        return None


class ImageProber:
    """
    Existence checks for candidate image URLs.

    Remote URLs get a HEAD request; anything else is treated as a path
    relative to `root`. A failed request counts as "not found". A prober
    created without a session opens its own and closes it in close().
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        root: str | Path = ".",
    ):
        self._owns_session = session is None
        self.session = session or create_session()
        self.timeout = timeout
        self.root = Path(root)

    def exists(self, url: str) -> bool:
        if not is_remote(url):
            return (self.root / url).is_file()

        try:
            response = self.session.head(url, timeout=self.timeout, allow_redirects=True)
        except requests.exceptions.RequestException as e:
            logger.debug("Probe failed for %s: %s", url, e)
            return False
        return response.ok

    def close(self) -> None:
        if self._owns_session:
            self.session.close()


class ProbeImageResolver(ImageResolver):
    """
    Resolve galleries by checking candidate URLs.

    The main slot is probed first; additional slots are probed concurrently
    and their results are put back in index order before the
    sequential-prefix rule is applied.
    """

    def __init__(
        self,
        prober: Optional[ImageProber] = None,
        settings: Optional[ImageSettings] = None,
    ):
        super().__init__(settings)
        self.prober = prober or ImageProber(timeout=self.settings.probe_timeout)

    def close(self) -> None:
        self.prober.close()

    def find_slot(self, product_id: str, index: Optional[int] = None) -> Optional[str]:
        for filename in self.slot_filenames(product_id, index):
            url = self.url_for(filename)
            if self.prober.exists(url):
                return url
        return None

    def _probe_indexed(self, product_id: str, index: int) -> Tuple[int, Optional[str]]:
        return index, self.find_slot(product_id, index)

    def find_additional(self, product_id: str) -> List[Tuple[int, Optional[str]]]:
        indices = list(self.additional_indices)
        if not indices:
            return []

        workers = max(1, min(self.settings.max_workers, len(indices)))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(self._probe_indexed, product_id, i) for i in indices]
            results = [future.result() for future in futures]

        # Completion order is irrelevant: rebuild by slot index
        return sorted(results, key=lambda item: item[0])
