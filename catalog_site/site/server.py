"""
Preview Server

Serves the catalog locally, running the page controllers per request:

    /                      listing; ?q=&category=&brand= filter server-side
    /product.html?id=...   detail page
    /assets/...            catalog.js / catalog.css
    anything else          static file under the catalog root (images)
"""

from __future__ import annotations

import http.server
import logging
import mimetypes
import socketserver
import urllib.parse
from pathlib import Path
from typing import Dict, Optional, Tuple, Type

from ..common.config_loader import CatalogSettings
from ..pages import DetailPage, ListingPage
from ..rendering import render_document
from ..rendering.assets import CATALOG_CSS, CATALOG_JS
from .builder import SCRIPT, STYLESHEET, site_header

logger = logging.getLogger(__name__)

ASSET_ROUTES: Dict[str, Tuple[str, str]] = {
    f"/{SCRIPT}": (CATALOG_JS, "application/javascript; charset=utf-8"),
    f"/{STYLESHEET}": (CATALOG_CSS, "text/css; charset=utf-8"),
}


class CatalogRequestHandler(http.server.BaseHTTPRequestHandler):
    """Handle catalog GET requests."""

    settings: CatalogSettings = None
    root: Path = Path(".")

    def _send(self, status: int, body: bytes, content_type: str) -> None:
        self.send_response(status)
        self.send_header("Content-type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _send_page(self, title: str, body) -> None:
        html = render_document(
            title, body,
            stylesheets=[f"/{STYLESHEET}"],
            scripts=[f"/{SCRIPT}"],
            header=site_header(self.settings.store_name),
        )
        self._send(200, html.encode("utf-8"), "text/html; charset=utf-8")

    def do_GET(self):
        """Route a GET request."""
        parsed = urllib.parse.urlparse(self.path)
        params = {k: v[0] for k, v in urllib.parse.parse_qs(parsed.query).items()}

        if parsed.path in ("/", "/index.html"):
            with ListingPage(self.settings, root=self.root) as page:
                body = page.view(
                    search=params.get("q", ""),
                    category=params.get("category", ""),
                    brand=params.get("brand", ""),
                    server_side=True,
                )
                self._send_page(page.title, body)
            return

        if parsed.path in ("/product", "/product.html"):
            with DetailPage(self.settings, root=self.root) as page:
                body = page.view(params)
                self._send_page(page.title, body)
            return

        if parsed.path in ASSET_ROUTES:
            content, content_type = ASSET_ROUTES[parsed.path]
            self._send(200, content.encode("utf-8"), content_type)
            return

        self._send_static(urllib.parse.unquote(parsed.path))

    def _send_static(self, path: str) -> None:
        root = self.root.resolve()
        target = (root / path.lstrip("/")).resolve()

        if root not in target.parents or not target.is_file():
            self._send(404, b"Not found", "text/plain; charset=utf-8")
            return

        content_type = mimetypes.guess_type(target.name)[0] or "application/octet-stream"
        self._send(200, target.read_bytes(), content_type)

    def log_message(self, format, *args):
        logger.info("%s - %s", self.address_string(), format % args)


class ThreadingCatalogServer(socketserver.ThreadingMixIn, http.server.HTTPServer):
    daemon_threads = True


def make_handler(settings: CatalogSettings, root: str | Path = ".") -> Type[CatalogRequestHandler]:
    """Create a handler class bound to the given settings and catalog root."""
    return type("BoundCatalogRequestHandler", (CatalogRequestHandler,), {
        "settings": settings,
        "root": Path(root),
    })


def serve(
    settings: CatalogSettings,
    root: str | Path = ".",
    host: str = "127.0.0.1",
    port: int = 8000,
    server_class: Optional[Type[http.server.HTTPServer]] = None,
) -> None:
    """Serve the catalog until interrupted."""
    server_class = server_class or ThreadingCatalogServer
    with server_class((host, port), make_handler(settings, root)) as server:
        logger.info("Serving %s at http://%s:%d/", settings.store_name, host, port)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            logger.info("Stopped")
