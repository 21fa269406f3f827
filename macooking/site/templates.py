"""HTML templates for the site shell and pages."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from html import escape
from urllib.parse import quote

from ..config import SITE_NAME
from ..content.models import Author, Post, PostMeta
from .styles import CSS, THEME_SCRIPT

NAV_LINKS: tuple[tuple[str, str], ...] = (
    ("Home", "/"),
    ("Blog", "/blog"),
    ("About", "/about"),
)

# Listing page anchors: (element id, label)
TABLE_OF_CONTENTS: tuple[tuple[str, str], ...] = (
    ("blog-list", "Blog Posts"),
    ("related-posts", "Related Posts"),
    ("author-info", "Author"),
)


def html_doc(title: str, body: str, description: str | None = None, year: int | None = None) -> str:
    meta_description = (
        f'<meta name="description" content="{escape(description, quote=True)}">\n' if description else ""
    )
    return (
        "<!doctype html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{escape(title)}</title>\n"
        f"{meta_description}"
        f"<style>{CSS}</style>\n"
        f"<script>{THEME_SCRIPT}</script>\n"
        "</head>\n"
        "<body>\n"
        f"{site_header()}\n"
        f'<main class="container">\n{body}\n</main>\n'
        f"{site_footer(year)}\n"
        "</body>\n"
        "</html>\n"
    )


def link(href: str, text: str, cls: str | None = None) -> str:
    class_attr = f' class="{escape(cls, quote=True)}"' if cls else ""
    return f'<a href="{escape(href, quote=True)}"{class_attr}>{escape(text)}</a>'


def site_header() -> str:
    nav = "".join(link(href, name) for name, href in NAV_LINKS)
    return (
        '<header class="site"><div class="container">'
        '<a href="/" class="logo">'
        '<img src="/globe.svg" alt="Logo" width="32" height="32">'
        f"{escape(SITE_NAME)}</a>"
        f"<nav>{nav}</nav>"
        '<button id="theme-toggle" class="theme-toggle" type="button" '
        'aria-label="Toggle dark mode">◐</button>'
        "</div></header>"
    )


def site_footer(year: int | None = None) -> str:
    year = year or date.today().year
    return (
        '<footer class="site"><div class="container">'
        f"&copy; {year} {escape(SITE_NAME)}. All rights reserved."
        "</div></footer>"
    )


def post_href(slug: str) -> str:
    return f"/blog/{quote(slug)}"


def table_of_contents(items: Iterable[tuple[str, str]] = TABLE_OF_CONTENTS) -> str:
    lines = ['<nav class="toc">', "<ul>"]
    for anchor, text in items:
        lines.append(f"<li>{link(f'#{anchor}', text)}</li>")
    lines.extend(["</ul>", "</nav>"])
    return "\n".join(lines)


def post_card(post: PostMeta, heading: str = "h2", more: str = "Read More →") -> str:
    return (
        '<div class="card">'
        f"<{heading}>{escape(post.title)}</{heading}>"
        f"<p>{escape(post.excerpt)}</p>"
        f"{link(post_href(post.slug), more, cls='more')}"
        "</div>"
    )


def author_card(author: Author) -> str:
    return (
        '<section id="author-info" class="author">'
        f'<img src="{escape(author.avatar_url, quote=True)}" alt="{escape(author.name, quote=True)}">'
        f"<h3>{escape(author.name)}</h3>"
        f"<p>{escape(author.bio)}</p>"
        "</section>"
    )


def blog_index(posts: Iterable[PostMeta], related: Iterable[PostMeta], author: Author) -> str:
    lines = [
        "<h1>Blog</h1>",
        table_of_contents(),
        '<div id="blog-list" class="grid">',
    ]
    lines.extend(post_card(p) for p in posts)
    lines.append("</div>")

    lines.append('<section id="related-posts" class="related">')
    lines.append("<h3>Related Posts</h3>")
    lines.append('<div class="grid">')
    lines.extend(post_card(p, heading="h4", more="Read More") for p in related)
    lines.extend(["</div>", "</section>"])

    lines.append(author_card(author))
    return "\n".join(lines)


def post_article(post: Post) -> str:
    return "\n".join(
        [
            '<article class="post">',
            f"<h1>{escape(post.title)}</h1>",
            f'<p class="muted">{escape(post.excerpt)}</p>',
            f'<div class="post-body">{escape(post.content)}</div>',
            link("/blog", "← Back to Blog", cls="back"),
            "</article>",
        ]
    )


def not_found_page() -> str:
    return (
        '<section class="not-found">'
        "<h1>404 - Page Not Found</h1>"
        "<p>Sorry, the page you are looking for does not exist.</p>"
        f"{link('/', 'Go Home', cls='button')}"
        "</section>"
    )


def error_page() -> str:
    return (
        '<section class="not-found">'
        "<h1>Something went wrong</h1>"
        "<p>The page could not be loaded. Please try again later.</p>"
        f"{link('/', 'Go Home', cls='button')}"
        "</section>"
    )
