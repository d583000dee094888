"""
Site tooling.

Modules:
    builder - StaticSiteBuilder writing index, detail pages and assets
    server  - Local preview server running the page controllers
    audit   - CatalogAudit for dropped rows and image coverage
"""

from .audit import AuditReport, CatalogAudit
from .builder import BuildResult, StaticSiteBuilder, detail_filename
from .server import CatalogRequestHandler, make_handler, serve

__all__ = [
    'AuditReport',
    'BuildResult',
    'CatalogAudit',
    'CatalogRequestHandler',
    'StaticSiteBuilder',
    'detail_filename',
    'make_handler',
    'serve',
]
