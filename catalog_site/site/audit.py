"""
CatalogAudit

Checks products.csv and the image manifest against each other and reports
what the catalog silently hides:

- CSV rows dropped because their field count differs from the header
  (often an unquoted comma in a description)
- required columns missing from the header
- duplicate product IDs (only the first is reachable from a detail page)
- products whose gallery falls back to the placeholder
- images that exist but are never shown because an earlier index is missing
- images that belong to no product
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional

from ..common.config_loader import ImageSettings
from ..common.constants import REQUIRED_FIELDS
from ..common.csv_utils import parse_csv_report
from ..images import ManifestImageResolver
from ..models import Product

_ADDITIONAL_RE = re.compile(r"^(?P<id>.+)-(?P<index>\d+)$")


@dataclass
class AuditReport:
    """Findings of one audit run."""
    total_rows: int = 0
    products: int = 0
    skipped_lines: List[int] = field(default_factory=list)
    missing_columns: List[str] = field(default_factory=list)
    duplicate_ids: List[str] = field(default_factory=list)
    without_images: List[str] = field(default_factory=list)
    unreachable_images: List[str] = field(default_factory=list)
    orphan_images: List[str] = field(default_factory=list)
    manifest_checked: bool = False

    @property
    def has_problems(self) -> bool:
        return bool(
            self.skipped_lines or self.missing_columns or self.duplicate_ids
            or self.unreachable_images
        )


class CatalogAudit:
    """
    Audit a catalog CSV, optionally against an image manifest.

    Usage::

        audit = CatalogAudit(settings.images)
        report = audit.run(csv_text, manifest=load_manifest("images/images.json"))
        audit.print_report(report)
    """

    def __init__(self, settings: Optional[ImageSettings] = None) -> None:
        self.settings = settings or ImageSettings()

    def run(self, csv_text: str, manifest: Optional[Iterable[str]] = None) -> AuditReport:
        parsed = parse_csv_report(csv_text)
        products = [Product.from_record(r) for r in parsed.records]

        report = AuditReport(
            total_rows=len(parsed.records) + len(parsed.skipped_lines),
            products=len(products),
            skipped_lines=list(parsed.skipped_lines),
            missing_columns=[c for c in REQUIRED_FIELDS if c not in parsed.headers],
        )

        counts = Counter(p.product_id for p in products)
        report.duplicate_ids = sorted(pid for pid, n in counts.items() if n > 1)

        if manifest is not None:
            self._check_images(report, products, frozenset(manifest))

        return report

    def _check_images(self, report: AuditReport, products: List[Product], manifest: FrozenSet[str]) -> None:
        report.manifest_checked = True
        resolver = ManifestImageResolver(manifest, self.settings)
        extensions = set(self.settings.extensions)

        shown: set[str] = set()
        product_ids = {p.product_id for p in products}
        for pid in sorted(product_ids):
            gallery = resolver.resolve(pid)
            if gallery.is_placeholder:
                report.without_images.append(pid)
                continue
            shown.update(url[len(self.settings.base_path):] for url in gallery)

        for filename in sorted(manifest):
            stem, _, ext = filename.rpartition(".")
            if ext.lower() not in extensions or filename in shown:
                continue
            if stem in product_ids:
                continue
            match = _ADDITIONAL_RE.match(stem)
            if match and match.group("id") in product_ids:
                report.unreachable_images.append(filename)
            else:
                report.orphan_images.append(filename)

    @staticmethod
    def print_report(report: AuditReport) -> None:
        """Print a human-readable report to stdout."""
        status = "ISSUES FOUND" if report.has_problems else "OK"

        print("\n" + "=" * 60)
        print(f"Catalog Audit  [{status}]")
        print("=" * 60)
        print(f"  Data rows:          {report.total_rows}")
        print(f"  Products loaded:    {report.products}")
        print(f"  Rows dropped:       {len(report.skipped_lines)}")
        if report.skipped_lines:
            print(f"    lines: {', '.join(str(n) for n in report.skipped_lines[:20])}")
            print("    (field count differs from header; check unquoted commas)")

        if report.missing_columns:
            print(f"  Missing columns:    {', '.join(report.missing_columns)}")
        if report.duplicate_ids:
            print(f"  Duplicate IDs:      {', '.join(report.duplicate_ids[:20])}")

        if report.manifest_checked:
            print("\n  Images:")
            print(f"    Products without images: {len(report.without_images)}")
            print(f"    Unreachable (index gap): {len(report.unreachable_images)}")
            for name in report.unreachable_images[:20]:
                print(f"      - {name}")
            print(f"    Not matching a product:  {len(report.orphan_images)}")
        print("=" * 60)
