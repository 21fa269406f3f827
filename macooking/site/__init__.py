"""Page rendering, static build and development server."""

from .build import build_site
from .pages import PageResult, render_blog_index, render_not_found, render_post, render_route

__all__ = [
    "PageResult",
    "build_site",
    "render_blog_index",
    "render_not_found",
    "render_post",
    "render_route",
]
