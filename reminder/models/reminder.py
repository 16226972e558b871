"""
Reminder record and the persisted snapshot that holds a collection of them.

Records are immutable values: a review produces a new record rather than
mutating the stored one, so a failed save never leaves a half-updated
reminder behind.
"""

from __future__ import annotations

from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MAX_REVIEWS = 4
SNAPSHOT_VERSION = 1


class Reminder(BaseModel):
    """A single note scheduled for repeated review."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: int = Field(gt=0)
    text: str
    created_at: date
    review_count: int = Field(default=0, ge=0, le=MAX_REVIEWS)
    next_due: date
    completed: bool = False

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("text must not be empty")
        return v

    @model_validator(mode="after")
    def completed_matches_review_count(self) -> "Reminder":
        if self.completed != (self.review_count == MAX_REVIEWS):
            raise ValueError(
                f"completed={self.completed} is inconsistent with "
                f"review_count={self.review_count}"
            )
        return self

    def is_due(self, as_of: date) -> bool:
        """Return True if the reminder is active and its due date has arrived."""
        return not self.completed and self.next_due <= as_of


class ReminderSnapshot(BaseModel):
    """Everything that is persisted: the records plus the ID counter.

    ``next_id`` is kept alongside the records so that removing the
    highest-numbered reminder never frees its ID for reuse.
    """

    model_config = ConfigDict(extra="ignore")

    version: int = SNAPSHOT_VERSION
    next_id: int = Field(default=1, gt=0)
    reminders: List[Reminder] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_version_and_ids(self) -> "ReminderSnapshot":
        if self.version != SNAPSHOT_VERSION:
            raise ValueError(f"unsupported file format version {self.version}")
        ids = [r.id for r in self.reminders]
        if len(ids) != len(set(ids)):
            raise ValueError("duplicate reminder IDs")
        return self

    def allocate_id(self) -> int:
        """Return the ID the next added reminder should receive."""
        highest = max((r.id for r in self.reminders), default=0)
        return max(self.next_id, highest + 1)
