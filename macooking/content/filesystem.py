"""Posts read from a local directory of Markdown files with front matter."""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from pathlib import Path
from typing import Any

import frontmatter
import yaml

from ..cms.client import ContentSourceError
from .models import Author, Post, PostMeta

logger = logging.getLogger(__name__)


class FilesystemContentStore:
    """Content store over ``{posts_dir}/{slug}.md`` files.

    Each file starts with a YAML front matter block carrying ``title``,
    ``date`` and ``excerpt``; the rest of the file is the post body.
    """

    def __init__(self, posts_dir: Path, author: Author | None = None):
        self.posts_dir = Path(posts_dir)
        self.author = author or Author(name="")

    async def list_posts(self) -> list[PostMeta]:
        return await asyncio.to_thread(self._list_posts_sync)

    async def get_post_by_slug(self, slug: str) -> Post | None:
        return await asyncio.to_thread(self._get_post_sync, slug)

    async def latest_posts(self, limit: int = 2) -> list[PostMeta]:
        """Newest posts by front matter ``date``; undated posts sort last."""
        if limit <= 0:
            return []
        posts = await self.list_posts()
        dated = sorted((p for p in posts if p.date), key=lambda p: p.date or "", reverse=True)
        undated = [p for p in posts if not p.date]
        return (dated + undated)[:limit]

    async def get_author(self) -> Author:
        return self.author

    def _list_posts_sync(self) -> list[PostMeta]:
        if not self.posts_dir.is_dir():
            logger.warning("Posts directory %s does not exist", self.posts_dir)
            return []
        posts: list[PostMeta] = []
        for path in sorted(self.posts_dir.glob("*.md")):
            if not path.is_file() or self._post_path(path.stem) is None:
                continue
            post = self._read_post(path)
            posts.append(PostMeta.model_validate(post.model_dump(exclude={"content"})))
        return posts

    def _get_post_sync(self, slug: str) -> Post | None:
        path = self._post_path(slug)
        if path is None or not path.is_file():
            return None
        return self._read_post(path)

    def _post_path(self, slug: str) -> Path | None:
        """Map a slug to its file, or ``None`` when it would leave ``posts_dir``."""
        if not slug or slug.startswith(".") or any(c in slug for c in "/\\\0"):
            return None
        path = self.posts_dir / f"{slug}.md"
        if path.resolve().parent != self.posts_dir.resolve():
            return None
        return path

    def _read_post(self, path: Path) -> Post:
        try:
            doc = frontmatter.load(str(path))
        except yaml.YAMLError as e:
            raise ContentSourceError(f"Invalid front matter in {path}: {e}") from e

        meta: dict[str, Any] = dict(doc.metadata)
        return Post(
            title=str(meta.get("title") or path.stem),
            slug=path.stem,
            date=_format_date(meta.get("date")),
            excerpt=str(meta.get("excerpt") or ""),
            content=doc.content,
        )


def _format_date(value: Any) -> str | None:
    # YAML turns bare 2024-01-01 into a date object.
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value.isoformat()
    return str(value)
