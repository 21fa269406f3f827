"""CLI entry point for Macooking."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import BACKENDS, DEFAULT_HOST, DEFAULT_PORT, SiteConfig, configure_logging


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="macooking",
        description="Render the Macooking blog from its content source.",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"Macooking {__version__}",
    )
    parser.add_argument("--backend", choices=BACKENDS, help="Content backend (overrides environment)")
    parser.add_argument("--posts-dir", type=Path, help="Markdown posts directory for the filesystem backend")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_build = sub.add_parser("build", help="Render the site to static HTML")
    p_build.add_argument("--out", "-o", type=Path, default=Path("./site"), help="Site output directory")
    p_build.add_argument("--analyze", action="store_true", help="Report the size of every page")

    p_serve = sub.add_parser("serve", help="Serve pages rendered on each request")
    p_serve.add_argument("--host", default=DEFAULT_HOST, help="Interface to bind")
    p_serve.add_argument("--port", "-p", type=int, default=DEFAULT_PORT, help="Port to listen on")

    sub.add_parser("posts", help="List post summaries")

    p_post = sub.add_parser("post", help="Show one post")
    p_post.add_argument("slug", help="Post slug")

    args = parser.parse_args(argv)

    updates: dict[str, Any] = {}
    if args.backend:
        updates["backend"] = args.backend
    if args.posts_dir:
        updates["posts_dir"] = args.posts_dir
    config = SiteConfig.from_env(**updates)
    configure_logging(config, verbose=bool(args.verbose))

    if args.cmd == "build":
        return _cmd_build(args, config)
    if args.cmd == "serve":
        return _cmd_serve(args, config)
    if args.cmd == "posts":
        return _cmd_posts(config)
    if args.cmd == "post":
        return _cmd_post(args, config)

    parser.print_help()
    return 2


def _store(config: SiteConfig) -> Any:
    from .content.store import create_store

    return create_store(config)


def _cmd_build(args: Any, config: SiteConfig) -> int:
    from .site.build import build_site

    analyze = bool(args.analyze) or config.analyze
    try:
        report = asyncio.run(build_site(_store(config), args.out, analyze=analyze))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("✓ Site generated")
    print(f"  Output: {report.get('out_dir')}")
    print(f"  Posts: {report.get('posts')}")
    total_bytes = int(report.get("total_bytes") or 0)
    print(f"  Size: {total_bytes / 1024:.1f} KB")
    if analyze:
        print("\nPages:")
        for rel, size in report.get("pages", {}).items():
            print(f"  {size / 1024:8.1f} KB  {rel}")
    return 0


def _cmd_serve(args: Any, config: SiteConfig) -> int:
    from .site.server import serve

    try:
        serve(_store(config), args.host, int(args.port))
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def _cmd_posts(config: SiteConfig) -> int:
    async def _run() -> int:
        try:
            posts = await _store(config).list_posts()
        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        if not posts:
            print("No posts found")
            return 0

        for p in posts:
            print(f"  {p.date or '':25} {p.slug:30} {p.title}")
        return 0

    return asyncio.run(_run())


def _cmd_post(args: Any, config: SiteConfig) -> int:
    async def _run() -> int:
        try:
            post = await _store(config).get_post_by_slug(args.slug)
        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        if post is None:
            print(f"Post not found: {args.slug}", file=sys.stderr)
            return 1

        print(post.title)
        if post.excerpt:
            print(post.excerpt)
        print()
        print(post.content)
        return 0

    return asyncio.run(_run())


if __name__ == "__main__":
    app()
