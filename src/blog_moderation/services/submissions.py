"""Submission business logic — the flows behind each screen."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from blog_moderation.exceptions import StorageUnavailableError, SubmissionValidationError
from blog_moderation.models.submission import Submission, SubmissionStatus

if TYPE_CHECKING:
    from blog_moderation.database.repositories.submissions import SubmissionRepository

logger = logging.getLogger(__name__)

SUBMIT_FAILED = "Submission failed"
NOT_FOUND = "Not found"
UPDATE_FAILED = "Failed to update submission status"


@dataclass(frozen=True)
class Outcome:
    """What a screen shows after calling the store."""

    ok: bool
    message: str
    submission: Submission | None = None


def validate_submission(title: str, content: str) -> None:
    """Reject blank required fields before they reach the store."""
    if not title.strip():
        raise SubmissionValidationError("title")
    if not content.strip():
        raise SubmissionValidationError("content")


def submit_blog(
    title: str,
    content: str,
    author: str | None,
    repo: SubmissionRepository,
) -> Outcome:
    """Validate and store a new submission, returning its reference id."""
    try:
        validate_submission(title, content)
        submission = repo.submit(title, content, author=author or None)
    except SubmissionValidationError as exc:
        logger.info("Submission rejected — field=%s", exc.field)
        return Outcome(ok=False, message=f"{SUBMIT_FAILED}: {exc}")
    except StorageUnavailableError:
        logger.exception("Submission not stored")
        return Outcome(ok=False, message=SUBMIT_FAILED)
    return Outcome(
        ok=True,
        message=f"Submitted — reference id {submission.id}",
        submission=submission,
    )


def check_status(submission_id: str, repo: SubmissionRepository) -> Outcome:
    """Look up a submission by the reference id given at submit time."""
    submission = repo.get_by_id(submission_id.strip())
    if submission is None:
        return Outcome(ok=False, message=NOT_FOUND)
    return Outcome(ok=True, message=submission.status.upper(), submission=submission)


def moderate(
    submission_id: str,
    status: SubmissionStatus,
    repo: SubmissionRepository,
    admin_note: str | None = None,
) -> Outcome:
    """Approve or reject a submission on behalf of an admin."""
    try:
        submission = repo.admin_update_status(submission_id, status, admin_note)
    except StorageUnavailableError:
        logger.exception("Status update not stored — id=%s", submission_id)
        return Outcome(ok=False, message=UPDATE_FAILED)
    if submission is None:
        return Outcome(ok=False, message=UPDATE_FAILED)
    return Outcome(
        ok=True,
        message=f"Blog submission has been {submission.status} successfully",
        submission=submission,
    )
