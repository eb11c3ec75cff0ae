"""Durable key-value storage backends."""

from blog_moderation.storage.backends import FileKeyValueStore, KeyValueStore, MemoryKeyValueStore

__all__ = [
    "FileKeyValueStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
]
