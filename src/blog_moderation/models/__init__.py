"""Data models for stored document types."""

from blog_moderation.models.base import DocumentBase
from blog_moderation.models.submission import Submission, SubmissionStatus

__all__ = [
    "DocumentBase",
    "Submission",
    "SubmissionStatus",
]
