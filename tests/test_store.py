"""Tests for the Sanity-backed content store and backend selection."""

from __future__ import annotations

import unittest
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

from macooking.cms.client import ContentSourceError, SanityClient
from macooking.config import SiteConfig
from macooking.content.filesystem import FilesystemContentStore
from macooking.content.models import Author, Post, PostMeta
from macooking.content.store import (
    AUTHOR_QUERY,
    POST_BY_SLUG_QUERY,
    POSTS_QUERY,
    SanityContentStore,
    create_store,
)


def _client(result: object) -> MagicMock:
    client = MagicMock(spec=SanityClient)
    client.query = AsyncMock(return_value=result)
    return client


class TestSanityContentStore(unittest.IsolatedAsyncioTestCase):
    async def test_list_posts_one_entry_per_record(self) -> None:
        rows = [
            {"title": "A", "slug": "a", "excerpt": "first", "date": "2024-03-01T00:00:00Z"},
            {"title": "B", "slug": "b", "excerpt": None},
            {"title": "C", "slug": "c", "excerpt": "third"},
        ]
        client = _client(rows)
        posts = await SanityContentStore(client).list_posts()

        client.query.assert_awaited_once_with(POSTS_QUERY)
        self.assertEqual([p.slug for p in posts], ["a", "b", "c"])
        self.assertEqual(posts[1].excerpt, "")
        self.assertIsInstance(posts[0], PostMeta)

    async def test_list_posts_empty(self) -> None:
        self.assertEqual(await SanityContentStore(_client([])).list_posts(), [])
        self.assertEqual(await SanityContentStore(_client(None)).list_posts(), [])

    async def test_list_posts_rejects_non_list(self) -> None:
        with self.assertRaises(ContentSourceError):
            await SanityContentStore(_client({"title": "A"})).list_posts()

    async def test_get_post_by_slug(self) -> None:
        row = {"title": "Hi", "slug": "hello", "excerpt": "Hello", "content": "World"}
        client = _client(row)
        post = await SanityContentStore(client).get_post_by_slug("hello")

        client.query.assert_awaited_once_with(POST_BY_SLUG_QUERY, {"slug": "hello"})
        self.assertIsInstance(post, Post)
        assert post is not None
        self.assertEqual(post.title, "Hi")
        self.assertEqual(post.content, "World")

    async def test_get_post_by_slug_absent(self) -> None:
        self.assertIsNone(await SanityContentStore(_client(None)).get_post_by_slug("nope"))

    async def test_latest_posts_orders_by_creation_and_limits(self) -> None:
        client = _client([{"title": "A", "slug": "a"}, {"title": "B", "slug": "b"}])
        latest = await SanityContentStore(client).latest_posts(2)

        query = client.query.await_args.args[0]
        self.assertIn("order(_createdAt desc)", query)
        self.assertIn("[0...2]", query)
        self.assertEqual([p.slug for p in latest], ["a", "b"])

    async def test_latest_posts_zero_limit_skips_query(self) -> None:
        client = _client([])
        self.assertEqual(await SanityContentStore(client).latest_posts(0), [])
        client.query.assert_not_awaited()

    async def test_queries_exclude_drafts(self) -> None:
        self.assertIn('drafts.**', POSTS_QUERY)
        self.assertIn('drafts.**', POST_BY_SLUG_QUERY)

    async def test_get_author(self) -> None:
        client = _client({"name": "Mac", "avatarUrl": "https://img.test/a.png", "bio": "Cook"})
        author = await SanityContentStore(client).get_author()

        client.query.assert_awaited_once_with(AUTHOR_QUERY)
        self.assertEqual(author, Author(name="Mac", avatar_url="https://img.test/a.png", bio="Cook"))

    async def test_get_author_missing_record(self) -> None:
        with self.assertRaises(ContentSourceError):
            await SanityContentStore(_client(None)).get_author()

    async def test_fetch_failure_propagates(self) -> None:
        client = MagicMock(spec=SanityClient)
        client.query = AsyncMock(side_effect=OSError("down"))
        with self.assertRaises(OSError):
            await SanityContentStore(client).list_posts()


class TestCreateStore(unittest.TestCase):
    def test_sanity_backend_uses_given_client(self) -> None:
        client = SanityClient(project_id="abc123")
        store = create_store(SiteConfig.from_env({}, backend="sanity"), client=client)
        self.assertIsInstance(store, SanityContentStore)
        self.assertIs(store.client, client)

    def test_sanity_backend_builds_client_from_config(self) -> None:
        config = SiteConfig.from_env(
            {}, backend="sanity", sanity_project_id="p1", sanity_dataset="staging"
        )
        store = create_store(config)
        self.assertIsInstance(store, SanityContentStore)
        self.assertEqual(store.client.project_id, "p1")
        self.assertEqual(store.client.dataset, "staging")

    def test_filesystem_backend(self) -> None:
        config = SiteConfig.from_env(
            {}, backend="filesystem", posts_dir=Path("content"), author_name="Mac"
        )
        store = create_store(config)
        self.assertIsInstance(store, FilesystemContentStore)
        self.assertEqual(store.posts_dir, Path("content"))
        self.assertEqual(store.author.name, "Mac")

    def test_unknown_backend(self) -> None:
        with self.assertRaises(ValueError):
            create_store(SiteConfig.from_env({}, backend="contentful"))


if __name__ == "__main__":
    unittest.main()
