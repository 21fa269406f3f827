"""Development server: renders every request fresh from the content store."""

from __future__ import annotations

import asyncio
import functools
import http.server
import logging

from ..content.store import ContentStore
from .pages import PageResult, render_error, render_route
from .styles import LOGO_SVG

logger = logging.getLogger(__name__)


class SiteRequestHandler(http.server.BaseHTTPRequestHandler):
    """Route GET and HEAD requests to page renderers; nothing is kept between requests."""

    server_version = "Macooking"
    _include_body = True

    def __init__(self, *args, store: ContentStore, **kwargs):
        self.store = store
        super().__init__(*args, **kwargs)

    def do_GET(self) -> None:  # noqa: N802 - http.server naming
        self._respond(include_body=True)

    def do_HEAD(self) -> None:  # noqa: N802
        self._respond(include_body=False)

    def _respond(self, include_body: bool) -> None:
        self._include_body = include_body
        if self.path.split("?", 1)[0] == "/globe.svg":
            self._send(200, LOGO_SVG.encode("utf-8"), "image/svg+xml")
            return

        try:
            page = asyncio.run(render_route(self.store, self.path))
        except Exception:
            logger.exception("Failed to render %s", self.path)
            page = render_error()

        self._send_page(page)

    def _send_page(self, page: PageResult) -> None:
        if page.status == 404:
            logger.warning("404 %s", self.path)
        extra = {"Location": page.location} if page.location else {}
        self._send(page.status, page.html.encode("utf-8"), "text/html; charset=utf-8", extra)

    def _send(
        self,
        status: int,
        body: bytes,
        content_type: str,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        for key, value in (headers or {}).items():
            self.send_header(key, value)
        self.end_headers()
        if self._include_body:
            self.wfile.write(body)

    def log_message(self, format: str, *args) -> None:
        logger.info("%s - %s", self.address_string(), format % args)


def make_server(store: ContentStore, host: str, port: int) -> http.server.ThreadingHTTPServer:
    handler = functools.partial(SiteRequestHandler, store=store)
    return http.server.ThreadingHTTPServer((host, port), handler)


def serve(store: ContentStore, host: str, port: int) -> None:
    httpd = make_server(store, host, port)
    logger.info("Serving http://%s:%d/blog", host, httpd.server_address[1])
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down server.")
    finally:
        httpd.server_close()
