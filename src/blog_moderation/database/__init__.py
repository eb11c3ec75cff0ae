"""Persistence for the submission collection."""

from blog_moderation.database.client import init_repository, init_storage
from blog_moderation.database.repositories import SubmissionRepository

__all__ = [
    "SubmissionRepository",
    "init_repository",
    "init_storage",
]
