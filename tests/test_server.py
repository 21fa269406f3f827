"""Tests for the development server."""

from __future__ import annotations

import tempfile
import threading
import unittest
import urllib.error
import urllib.request
from pathlib import Path

from macooking.content.filesystem import FilesystemContentStore
from macooking.content.models import Author
from macooking.site.server import make_server


class _BrokenStore(FilesystemContentStore):
    async def list_posts(self):
        raise OSError("content source unreachable")


class TestServer(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.posts = Path(self._tmp.name)
        (self.posts / "hello.md").write_text(
            "---\ntitle: Hi\nexcerpt: Hello\n---\nWorld\n", encoding="utf-8"
        )
        self.httpd = None

    def tearDown(self) -> None:
        if self.httpd is not None:
            self.httpd.shutdown()
            self.httpd.server_close()
        self._tmp.cleanup()

    def _start(self, store) -> str:
        self.httpd = make_server(store, "127.0.0.1", 0)
        thread = threading.Thread(target=self.httpd.serve_forever, daemon=True)
        thread.start()
        return f"http://127.0.0.1:{self.httpd.server_address[1]}"

    def _get(self, url: str) -> tuple[int, str]:
        try:
            with urllib.request.urlopen(url, timeout=10) as resp:
                return resp.status, resp.read().decode("utf-8")
        except urllib.error.HTTPError as e:
            return e.code, e.read().decode("utf-8")

    def test_serves_pages(self) -> None:
        base = self._start(FilesystemContentStore(self.posts, author=Author(name="Mac")))

        status, body = self._get(f"{base}/blog")
        self.assertEqual(status, 200)
        self.assertIn('href="/blog/hello"', body)

        status, body = self._get(f"{base}/blog/hello")
        self.assertEqual(status, 200)
        self.assertIn("<title>Hi</title>", body)

        status, body = self._get(f"{base}/blog/does-not-exist")
        self.assertEqual(status, 404)
        self.assertIn("<title>Post Not Found</title>", body)

        status, body = self._get(f"{base}/globe.svg")
        self.assertEqual(status, 200)
        self.assertIn("<svg", body)

    def test_head_sends_headers_without_body(self) -> None:
        base = self._start(FilesystemContentStore(self.posts, author=Author(name="Mac")))
        req = urllib.request.Request(f"{base}/blog/hello", method="HEAD")
        with urllib.request.urlopen(req, timeout=10) as resp:
            self.assertEqual(resp.status, 200)
            self.assertGreater(int(resp.headers["Content-Length"]), 0)
            self.assertEqual(resp.read(), b"")

        req = urllib.request.Request(f"{base}/blog/does-not-exist", method="HEAD")
        with self.assertRaises(urllib.error.HTTPError) as ctx:
            urllib.request.urlopen(req, timeout=10)
        self.assertEqual(ctx.exception.code, 404)
        ctx.exception.close()

    def test_root_redirects_to_blog(self) -> None:
        base = self._start(FilesystemContentStore(self.posts, author=Author(name="Mac")))
        with urllib.request.urlopen(f"{base}/", timeout=10) as resp:
            self.assertTrue(resp.geturl().endswith("/blog"))

    def test_fetch_failure_becomes_500(self) -> None:
        base = self._start(_BrokenStore(self.posts))
        with self.assertLogs("macooking.site.server", level="ERROR"):
            status, body = self._get(f"{base}/blog")
        self.assertEqual(status, 500)
        self.assertIn("Something went wrong", body)


if __name__ == "__main__":
    unittest.main()
