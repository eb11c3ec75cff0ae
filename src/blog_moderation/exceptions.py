"""Error kinds surfaced to callers of the submission store."""

from __future__ import annotations


class StorageUnavailableError(RuntimeError):
    """Durable storage could not be read or written."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Storage unavailable for {key!r}: {reason}")
        self.key = key
        self.reason = reason


class SubmissionValidationError(ValueError):
    """A submission was rejected before reaching the store."""

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} must not be empty")
        self.field = field
