"""Submission document model — blog posts moving through moderation."""

from __future__ import annotations

from enum import StrEnum

from blog_moderation.models.base import DocumentBase


class SubmissionStatus(StrEnum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Submission(DocumentBase):
    """A visitor-submitted blog post awaiting or past admin review."""

    title: str
    author: str | None = None
    content: str
    status: SubmissionStatus = SubmissionStatus.PENDING
    admin_note: str | None = None
