"""Application settings loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_STORAGE_KEY = "blog_aggregator_submissions_v1"


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


@dataclass(frozen=True)
class StorageConfig:
    """Where the submission collection is persisted."""

    backend: str = field(default_factory=lambda: _env("BLOG_MODERATION_STORAGE_BACKEND", "file"))
    data_dir: Path = field(default_factory=lambda: Path(_env("BLOG_MODERATION_DATA_DIR", ".data")))
    key: str = field(default_factory=lambda: _env("BLOG_MODERATION_STORAGE_KEY", DEFAULT_STORAGE_KEY))


@dataclass(frozen=True)
class AppConfig:
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: _env("LOG_FILE"))


@dataclass(frozen=True)
class Settings:
    storage: StorageConfig = field(default_factory=StorageConfig)
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
