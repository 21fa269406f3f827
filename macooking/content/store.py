"""Content stores: one capability interface, two interchangeable backends."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from ..cms.client import ContentSourceError, SanityClient
from ..config import BACKENDS, SiteConfig
from .filesystem import FilesystemContentStore
from .models import Author, Post, PostMeta

logger = logging.getLogger(__name__)

RELATED_POSTS_LIMIT = 2

# Published posts only; draft copies live under "drafts.<id>".
_POST_FILTER = '_type == "post" && !(_id in path("drafts.**"))'
_META_PROJECTION = '{title, "slug": slug.current, excerpt, "date": _createdAt}'
_POST_PROJECTION = '{title, "slug": slug.current, excerpt, content, "date": _createdAt}'

POSTS_QUERY = f"*[{_POST_FILTER}]{_META_PROJECTION}"
POST_BY_SLUG_QUERY = f"*[{_POST_FILTER} && slug.current == $slug][0]{_POST_PROJECTION}"
LATEST_POSTS_QUERY = "*[{filter}] | order(_createdAt desc)[0...{limit}]{projection}"
AUTHOR_QUERY = '*[_type == "author"][0]{name, avatarUrl, bio}'


class ContentStore(Protocol):
    async def list_posts(self) -> list[PostMeta]: ...

    async def get_post_by_slug(self, slug: str) -> Post | None: ...

    async def latest_posts(self, limit: int = RELATED_POSTS_LIMIT) -> list[PostMeta]: ...

    async def get_author(self) -> Author: ...


class SanityContentStore:
    """Posts and author read from a Sanity dataset."""

    def __init__(self, client: SanityClient):
        self.client = client

    async def list_posts(self) -> list[PostMeta]:
        """Fetch all post summaries, in whatever order the source returns."""
        rows = await self.client.query(POSTS_QUERY)
        return [PostMeta.model_validate(_clean(row)) for row in _as_list(rows)]

    async def get_post_by_slug(self, slug: str) -> Post | None:
        """Fetch one post with its body; ``None`` when no post has that slug."""
        row = await self.client.query(POST_BY_SLUG_QUERY, {"slug": slug})
        if row is None:
            logger.debug("No post with slug %r", slug)
            return None
        return Post.model_validate(_clean(row))

    async def latest_posts(self, limit: int = RELATED_POSTS_LIMIT) -> list[PostMeta]:
        """Fetch the ``limit`` most recently created post summaries, newest first."""
        if limit <= 0:
            return []
        query = LATEST_POSTS_QUERY.format(
            filter=_POST_FILTER, limit=int(limit), projection=_META_PROJECTION
        )
        rows = await self.client.query(query)
        return [PostMeta.model_validate(_clean(row)) for row in _as_list(rows)][:limit]

    async def get_author(self) -> Author:
        row = await self.client.query(AUTHOR_QUERY)
        if not isinstance(row, dict):
            raise ContentSourceError("No author record in the content source")
        return Author.model_validate(_clean(row))


def _as_list(rows: Any) -> list[dict[str, Any]]:
    if rows is None:
        return []
    if not isinstance(rows, list):
        raise ContentSourceError(f"Expected a list of records, got {type(rows).__name__}")
    return rows


def _clean(row: Any) -> dict[str, Any]:
    # GROQ projects missing fields as null; let model defaults apply instead.
    if not isinstance(row, dict):
        raise ContentSourceError(f"Expected a record, got {type(row).__name__}")
    return {k: v for k, v in row.items() if v is not None}


def create_store(config: SiteConfig, client: SanityClient | None = None) -> ContentStore:
    """Return the content store selected by ``config.backend``."""
    if config.backend == "sanity":
        return SanityContentStore(client or SanityClient.from_config(config))
    if config.backend == "filesystem":
        author = Author(
            name=config.author_name,
            avatar_url=config.author_avatar_url,
            bio=config.author_bio,
        )
        return FilesystemContentStore(config.posts_dir, author=author)
    raise ValueError(f"Unknown content backend {config.backend!r} (expected one of {BACKENDS})")
