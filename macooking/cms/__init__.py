"""Content source adapter for the Sanity query API."""

from .client import ContentSourceError, HTTPError, SanityClient

__all__ = [
    "ContentSourceError",
    "HTTPError",
    "SanityClient",
]
