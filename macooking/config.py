"""Configuration constants and settings for Macooking."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel

SITE_NAME = "Macooking"

# Environment variable -> default. Every setting below reads through this table.
ENV_DEFAULTS: dict[str, str] = {
    "MACOOKING_SANITY_PROJECT_ID": "your_project_id",
    "MACOOKING_SANITY_DATASET": "production",
    "MACOOKING_SANITY_API_VERSION": "2023-07-12",
    "MACOOKING_SANITY_USE_CDN": "true",
    "MACOOKING_SANITY_TOKEN": "",
    "MACOOKING_CONTENT_BACKEND": "sanity",
    "MACOOKING_POSTS_DIR": "posts",
    "MACOOKING_AUTHOR_NAME": SITE_NAME,
    "MACOOKING_AUTHOR_AVATAR_URL": "/globe.svg",
    "MACOOKING_AUTHOR_BIO": "",
    "MACOOKING_ENV": "",
    "NODE_ENV": "",
    "ANALYZE": "",
}


def _setting(name: str, environ: Mapping[str, str] = os.environ) -> str:
    return environ.get(name, ENV_DEFAULTS[name])


# Sanity project settings
# Override via MACOOKING_SANITY_* environment variables
SANITY_PROJECT_ID = _setting("MACOOKING_SANITY_PROJECT_ID")
SANITY_DATASET = _setting("MACOOKING_SANITY_DATASET")
SANITY_API_VERSION = _setting("MACOOKING_SANITY_API_VERSION")

# HTTP client settings
CONNECT_TIMEOUT = 10.0
READ_TIMEOUT = 30.0

# Dev server
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8787

BACKENDS = ("sanity", "filesystem")


def _truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


class SiteConfig(BaseModel):
    """Settings for one process, built once and passed down explicitly."""

    sanity_project_id: str
    sanity_dataset: str
    sanity_api_version: str
    sanity_use_cdn: bool
    sanity_token: str | None = None

    backend: str
    posts_dir: Path

    author_name: str
    author_avatar_url: str
    author_bio: str

    production: bool = False
    analyze: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> "SiteConfig":
        """Build settings from environment variables (defaults to ``os.environ``).

        Keyword ``overrides`` replace individual fields after the environment is read.
        """
        env = os.environ if environ is None else environ
        data: dict[str, object] = {
            "sanity_project_id": _setting("MACOOKING_SANITY_PROJECT_ID", env),
            "sanity_dataset": _setting("MACOOKING_SANITY_DATASET", env),
            "sanity_api_version": _setting("MACOOKING_SANITY_API_VERSION", env),
            "sanity_use_cdn": _truthy(_setting("MACOOKING_SANITY_USE_CDN", env)),
            "sanity_token": _setting("MACOOKING_SANITY_TOKEN", env) or None,
            "backend": _setting("MACOOKING_CONTENT_BACKEND", env).strip().lower(),
            "posts_dir": Path(_setting("MACOOKING_POSTS_DIR", env)),
            "author_name": _setting("MACOOKING_AUTHOR_NAME", env),
            "author_avatar_url": _setting("MACOOKING_AUTHOR_AVATAR_URL", env),
            "author_bio": _setting("MACOOKING_AUTHOR_BIO", env),
            "production": (_setting("MACOOKING_ENV", env) or _setting("NODE_ENV", env)).lower()
            == "production",
            "analyze": _truthy(_setting("ANALYZE", env)),
        }
        data.update(overrides)
        return cls(**data)


def configure_logging(config: SiteConfig, verbose: bool = False) -> None:
    """Configure root logging; production mode only reports warnings and errors."""
    if config.production:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
