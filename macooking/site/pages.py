"""Page rendering: each page is a function of the content it fetches."""

from __future__ import annotations

import asyncio
import logging
import re
from urllib.parse import unquote, urlsplit

from pydantic import BaseModel

from ..config import SITE_NAME
from ..content.store import RELATED_POSTS_LIMIT, ContentStore
from .templates import blog_index, error_page, html_doc, not_found_page, post_article

logger = logging.getLogger(__name__)

BLOG_TITLE = f"Blog | {SITE_NAME}"
BLOG_DESCRIPTION = f"Browse the latest posts on {SITE_NAME}."
POST_NOT_FOUND_TITLE = "Post Not Found"
NOT_FOUND_TITLE = "404 - Page Not Found"
ERROR_TITLE = f"Error | {SITE_NAME}"

_POST_ROUTE = re.compile(r"^/blog/([^/]+)$")


class PageResult(BaseModel):
    """A rendered page plus the status it should be served with."""

    status: int = 200
    title: str
    description: str | None = None
    html: str = ""
    location: str | None = None


async def render_blog_index(store: ContentStore) -> PageResult:
    """Render the listing page.

    Posts, author and related posts are fetched concurrently; if any fetch
    fails the whole page fails.
    """
    posts, author, related = await asyncio.gather(
        store.list_posts(),
        store.get_author(),
        store.latest_posts(RELATED_POSTS_LIMIT),
    )
    logger.debug("Rendering blog index: %d posts, %d related", len(posts), len(related))
    body = blog_index(posts, related[:RELATED_POSTS_LIMIT], author)
    return PageResult(
        title=BLOG_TITLE,
        description=BLOG_DESCRIPTION,
        html=html_doc(BLOG_TITLE, body, description=BLOG_DESCRIPTION),
    )


async def render_post(store: ContentStore, slug: str) -> PageResult:
    """Render one post, or the not-found page when no post has ``slug``."""
    post = await store.get_post_by_slug(slug)
    if post is None:
        return render_not_found(title=POST_NOT_FOUND_TITLE)

    body = post_article(post)
    return PageResult(
        title=post.title,
        description=post.excerpt,
        html=html_doc(post.title, body, description=post.excerpt),
    )


def render_not_found(title: str = NOT_FOUND_TITLE) -> PageResult:
    return PageResult(status=404, title=title, html=html_doc(title, not_found_page()))


def render_error() -> PageResult:
    return PageResult(status=500, title=ERROR_TITLE, html=html_doc(ERROR_TITLE, error_page()))


async def render_route(store: ContentStore, path: str) -> PageResult:
    """Dispatch a request path to its page renderer."""
    route = urlsplit(path).path.rstrip("/") or "/"

    if route == "/":
        return PageResult(status=302, title=BLOG_TITLE, location="/blog")
    if route == "/blog":
        return await render_blog_index(store)

    match = _POST_ROUTE.match(route)
    if match:
        return await render_post(store, unquote(match.group(1)))

    return render_not_found()
