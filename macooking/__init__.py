"""Macooking: a small server-rendered blog backed by a headless CMS."""

__version__ = "0.1.0"
