"""Shared fixtures for submission store tests."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from blog_moderation.database.repositories.submissions import SubmissionRepository
from blog_moderation.models.submission import Submission, SubmissionStatus
from blog_moderation.storage import MemoryKeyValueStore

TEST_KEY = "test_submissions"


def make_seed() -> list[Submission]:
    return [
        Submission(
            id="seed-approved",
            title="Approved post",
            author="Ann",
            content="Visible on the home screen",
            created_at=datetime(2025, 1, 2, tzinfo=UTC),
            status=SubmissionStatus.APPROVED,
        ),
        Submission(
            id="seed-pending",
            title="Pending post",
            content="Waiting for review",
            created_at=datetime(2025, 1, 3, tzinfo=UTC),
        ),
        Submission(
            id="seed-rejected",
            title="Rejected post",
            content="Not suitable",
            created_at=datetime(2025, 1, 1, tzinfo=UTC),
            status=SubmissionStatus.REJECTED,
            admin_note="Off topic",
        ),
    ]


@pytest.fixture
def storage() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def repo(storage: MemoryKeyValueStore) -> SubmissionRepository:
    """Create a repo over in-memory storage seeded with three records."""
    return SubmissionRepository(storage, key=TEST_KEY, seed=make_seed)


@pytest.fixture
def seed_factory():
    """Return the callable a repository uses to build its seed collection."""
    return make_seed
