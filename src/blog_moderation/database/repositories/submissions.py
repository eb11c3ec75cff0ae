"""Repository for the submissions slot — the whole collection in one JSON array."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from blog_moderation.config import DEFAULT_STORAGE_KEY
from blog_moderation.database.seed import load_seed_submissions
from blog_moderation.exceptions import StorageUnavailableError
from blog_moderation.models.base import new_id
from blog_moderation.models.submission import Submission, SubmissionStatus

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from blog_moderation.storage import KeyValueStore

logger = logging.getLogger(__name__)

_SUBMISSION_LIST = TypeAdapter(list[Submission])


def _newest_first(submissions: Iterable[Submission]) -> list[Submission]:
    # sorted() is stable, so equal timestamps keep their stored order.
    return sorted(submissions, key=lambda s: s.created_at, reverse=True)


class SubmissionRepository:
    """Read and mutate the submission collection.

    Every call reads the full collection from the backend and every mutation
    writes it back in full. No state survives between calls.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        key: str = DEFAULT_STORAGE_KEY,
        seed: Callable[[], list[Submission]] = load_seed_submissions,
    ) -> None:
        self._storage = storage
        self._key = key
        self._seed = seed

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[Submission]:
        """Return the stored collection, bootstrapping from seed data if needed."""
        try:
            raw = self._storage.get(self._key)
        except StorageUnavailableError as exc:
            logger.warning("Storage read failed, using seed data — key=%s reason=%s", self._key, exc.reason)
            raw = None

        if raw:
            try:
                return _SUBMISSION_LIST.validate_python(json.loads(raw))
            except (ValueError, RecursionError, ValidationError) as exc:
                logger.warning("Stored submissions malformed, using seed data — key=%s error=%s", self._key, exc)

        submissions = self._seed()
        try:
            self.save(submissions)
        except StorageUnavailableError as exc:
            logger.warning("Seed data not persisted — key=%s reason=%s", self._key, exc.reason)
        else:
            logger.info("Storage bootstrapped from seed — key=%s count=%d", self._key, len(submissions))
        return submissions

    def save(self, submissions: list[Submission]) -> None:
        """Overwrite the stored collection.

        Raises ``StorageUnavailableError`` when the backend cannot be written.
        """
        body = json.dumps([s.to_document() for s in submissions], ensure_ascii=False)
        self._storage.set(self._key, body)

    def submit(self, title: str, content: str, author: str | None = None) -> Submission:
        """Create a pending submission at the front of the collection."""
        submissions = self.load()
        taken = {s.id for s in submissions}
        submission_id = new_id()
        while submission_id in taken:
            submission_id = new_id()

        submission = Submission(
            id=submission_id,
            title=title,
            author=author,
            content=content,
            created_at=datetime.now(UTC),
            status=SubmissionStatus.PENDING,
        )
        submissions.insert(0, submission)
        self.save(submissions)
        logger.info("Submission created — id=%s", submission.id)
        return submission

    def list_approved(self) -> list[Submission]:
        """Fetch approved submissions, newest first."""
        return _newest_first(s for s in self.load() if s.status == SubmissionStatus.APPROVED)

    def get_by_id(self, submission_id: str) -> Submission | None:
        """Fetch a submission by id, or None when no record matches."""
        return next((s for s in self.load() if s.id == submission_id), None)

    def admin_list_all(self) -> list[Submission]:
        """Fetch every submission regardless of status, newest first."""
        return _newest_first(self.load())

    def admin_update_status(
        self,
        submission_id: str,
        status: SubmissionStatus,
        admin_note: str | None = None,
    ) -> Submission | None:
        """Set a submission's moderation status.

        ``admin_note=None`` keeps the current note, a blank string clears it,
        and any other string replaces it. Returns None without writing when
        the id is unknown.
        """
        submissions = self.load()
        submission = next((s for s in submissions if s.id == submission_id), None)
        if submission is None:
            logger.info("Status update skipped, submission not found — id=%s", submission_id)
            return None

        submission.status = SubmissionStatus(status)
        if admin_note is not None:
            submission.admin_note = admin_note if admin_note.strip() else None
        self.save(submissions)
        logger.info("Submission status updated — id=%s status=%s", submission.id, submission.status)
        return submission
