"""HTTP client for the Sanity content query API.

Requests go through the standard library on a worker thread, so the client
has no persistent resources and needs no HTTP framework dependency.
"""

from __future__ import annotations

import asyncio
import gzip
import json
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

from ..config import (
    CONNECT_TIMEOUT,
    READ_TIMEOUT,
    SANITY_API_VERSION,
    SANITY_DATASET,
    SANITY_PROJECT_ID,
    SiteConfig,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HTTPError(Exception):
    """Raised for non-2xx HTTP responses."""

    url: str
    status_code: int
    headers: dict[str, str]
    content: bytes

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"HTTP {self.status_code} for {self.url}"


class ContentSourceError(Exception):
    """Raised when the content source answers with something unusable."""


class SanityClient:
    """Async client for one Sanity project/dataset pair."""

    def __init__(
        self,
        project_id: str = SANITY_PROJECT_ID,
        dataset: str = SANITY_DATASET,
        api_version: str = SANITY_API_VERSION,
        use_cdn: bool = True,
        token: str | None = None,
    ):
        if not project_id:
            raise ValueError("project_id is required")
        self.project_id = project_id
        self.dataset = dataset
        self.api_version = api_version.lstrip("v")
        self.use_cdn = use_cdn
        self._token = token

    @classmethod
    def from_config(cls, config: SiteConfig) -> "SanityClient":
        return cls(
            project_id=config.sanity_project_id,
            dataset=config.sanity_dataset,
            api_version=config.sanity_api_version,
            use_cdn=config.sanity_use_cdn,
            token=config.sanity_token,
        )

    @property
    def base_url(self) -> str:
        host = "apicdn.sanity.io" if self.use_cdn else "api.sanity.io"
        return f"https://{self.project_id}.{host}/v{self.api_version}"

    def query_url(self, query: str, params: dict[str, Any] | None = None) -> str:
        """Build the GET URL for a GROQ query.

        Query parameters are sent as ``$name`` keys with JSON-encoded values.
        """
        fields: list[tuple[str, str]] = [("query", query)]
        for name, value in sorted((params or {}).items()):
            fields.append((f"${name}", json.dumps(value)))
        return f"{self.base_url}/data/query/{self.dataset}?{urlencode(fields)}"

    async def query(self, query: str, params: dict[str, Any] | None = None) -> Any:
        """Run a GROQ query and return its ``result`` member."""
        url = self.query_url(query, params)
        logger.debug("Sanity query: %s params=%s", query, params)
        content, headers, status = await asyncio.to_thread(self._fetch_sync, url)

        if status >= 400:
            raise HTTPError(url=url, status_code=status, headers=headers, content=content)

        return _parse_result(content, url)

    async def close(self) -> None:
        """Compatibility no-op (stdlib client has no persistent resources)."""
        return

    async def __aenter__(self) -> "SanityClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    def _fetch_sync(self, url: str) -> tuple[bytes, dict[str, str], int]:
        # urllib only has a single timeout, so we pick the larger of connect/read.
        timeout = max(float(CONNECT_TIMEOUT), float(READ_TIMEOUT))
        request_headers = {
            "Accept": "application/json",
            "Accept-Encoding": "gzip",
        }
        if self._token:
            request_headers["Authorization"] = f"Bearer {self._token}"
        req = urllib.request.Request(url, headers=request_headers, method="GET")

        try:
            with urllib.request.urlopen(req, timeout=timeout) as resp:
                status = int(getattr(resp, "status", 200))
                headers = {k: v for k, v in resp.headers.items()}
                content = resp.read() or b""
        except urllib.error.HTTPError as e:
            status = int(getattr(e, "code", 0) or 0)
            headers = {k: v for k, v in (e.headers.items() if e.headers else [])}
            content = e.read() or b""

        return _maybe_gunzip(content, headers), headers, status


def _parse_result(content: bytes, url: str) -> Any:
    try:
        payload = json.loads(content.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ContentSourceError(f"Malformed response from {url}: {e}") from e

    if not isinstance(payload, dict) or "result" not in payload:
        raise ContentSourceError(f"Response from {url} has no 'result' member")
    return payload["result"]


def _maybe_gunzip(content: bytes, headers: dict[str, str]) -> bytes:
    if (headers.get("Content-Encoding") or "").lower() != "gzip":
        return content
    try:
        return gzip.decompress(content)
    except OSError:
        return content
