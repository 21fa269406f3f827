"""Read-only projections of posts and authors."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PostMeta(BaseModel):
    """Summary of a single post, as shown on the listing page."""

    model_config = ConfigDict(frozen=True)

    title: str
    slug: str
    excerpt: str = ""
    date: str | None = None


class Post(PostMeta):
    """A post with its full body."""

    content: str = ""


class Author(BaseModel):
    """Author profile shown in the listing page's author card."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    avatar_url: str = Field(default="", alias="avatarUrl")
    bio: str = ""
