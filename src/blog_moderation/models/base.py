"""Base model shared by stored documents."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def new_id() -> str:
    return uuid4().hex


class DocumentBase(BaseModel):
    """A stored record with an opaque id and a creation timestamp.

    Stored keys are camelCase (``createdAt``); both spellings are accepted on
    input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(default_factory=new_id, min_length=1)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    def to_document(self) -> dict:
        """Serialize for storage, omitting absent optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
