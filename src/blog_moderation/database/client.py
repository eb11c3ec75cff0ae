"""Storage backend initialization."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from blog_moderation.database.repositories.submissions import SubmissionRepository
from blog_moderation.storage import FileKeyValueStore, KeyValueStore, MemoryKeyValueStore

if TYPE_CHECKING:
    from blog_moderation.config import StorageConfig

logger = logging.getLogger(__name__)


def init_storage(config: StorageConfig) -> KeyValueStore:
    """Create the key-value backend named by the storage config."""
    if config.backend == "memory":
        logger.info("Storage initialized — backend=memory")
        return MemoryKeyValueStore()
    if config.backend == "file":
        logger.info("Storage initialized — backend=file dir=%s", config.data_dir)
        return FileKeyValueStore(config.data_dir)
    raise ValueError(f"Unknown storage backend: {config.backend!r}")


def init_repository(config: StorageConfig) -> SubmissionRepository:
    """Build the single submission store for this process."""
    return SubmissionRepository(init_storage(config), key=config.key)
