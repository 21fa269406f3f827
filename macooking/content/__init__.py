"""Post and author models and the stores that produce them."""

from .filesystem import FilesystemContentStore
from .models import Author, Post, PostMeta
from .store import ContentStore, SanityContentStore, create_store

__all__ = [
    "Author",
    "ContentStore",
    "FilesystemContentStore",
    "Post",
    "PostMeta",
    "SanityContentStore",
    "create_store",
]
