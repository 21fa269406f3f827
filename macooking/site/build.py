"""Static site generator: renders every page once into an output directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ..content.store import ContentStore
from .pages import render_blog_index, render_not_found, render_post
from .styles import LOGO_SVG

logger = logging.getLogger(__name__)


async def build_site(store: ContentStore, out_dir: Path, analyze: bool = False) -> dict[str, Any]:
    """Build a static HTML site from a content store."""
    out_dir = out_dir.resolve()
    out_dir.mkdir(parents=True, exist_ok=True)
    pages: dict[str, int] = {}

    def write(rel: str, text: str) -> None:
        path = out_dir / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        pages[rel] = len(text.encode("utf-8"))

    index = await render_blog_index(store)
    write("blog/index.html", index.html)

    posts = await store.list_posts()
    for meta in posts:
        if not _is_path_safe(meta.slug):
            logger.warning("Skipping post %r: slug is not usable as a directory name", meta.slug)
            continue
        page = await render_post(store, meta.slug)
        if page.status != 200:
            # Listed but gone by the time we asked for it.
            logger.warning("Skipping post %r: %s", meta.slug, page.title)
            continue
        write(f"blog/{meta.slug}/index.html", page.html)

    write("404.html", render_not_found().html)
    write("globe.svg", LOGO_SVG)

    report: dict[str, Any] = {
        "posts": len(posts),
        "out_dir": str(out_dir),
        "total_bytes": _dir_size_bytes(out_dir),
    }
    if analyze:
        report["pages"] = dict(sorted(pages.items(), key=lambda kv: kv[1], reverse=True))
    return report


def _is_path_safe(slug: str) -> bool:
    return bool(slug) and not slug.startswith(".") and not any(c in slug for c in "/\\\0")


def _dir_size_bytes(path: Path) -> int:
    total = 0
    for p in path.rglob("*"):
        if p.is_file():
            total += p.stat().st_size
    return total
