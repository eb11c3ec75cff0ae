"""Repository modules for each stored collection."""

from blog_moderation.database.repositories.submissions import SubmissionRepository

__all__ = [
    "SubmissionRepository",
]
