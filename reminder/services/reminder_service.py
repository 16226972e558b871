"""
Reminder Store

Owns the reminder collection and exposes the user-facing operations.
State is loaded once when the store is created and written back after
every successful mutation.
"""

from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional

import structlog

from reminder.domain.errors import InvalidInput, NotFound
from reminder.domain.repositories import ReminderRepository
from reminder.models.reminder import Reminder, ReminderSnapshot
from reminder.services.srs.interval_schedule import advance, first_due_date

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ReminderStats:
    """Counts over the reminder collection as of a given date."""

    total: int
    active: int
    completed: int
    due: int


class ReminderStore:
    """Ordered collection of reminders keyed by ID."""

    def __init__(self, repository: ReminderRepository):
        """
        Load the current state from the repository.

        Args:
            repository: Persistence backend with load() and save() methods.

        Raises:
            CorruptState: Persisted data could not be parsed.
            IoError: Persisted data could not be read.
        """
        self.repository = repository
        snapshot = repository.load()
        self._reminders: Dict[int, Reminder] = {r.id: r for r in snapshot.reminders}
        self._next_id = snapshot.allocate_id()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self) -> List[Reminder]:
        """Return every reminder, including completed ones, in ascending ID order."""
        return [self._reminders[i] for i in sorted(self._reminders)]

    def due(self, as_of: date) -> List[Reminder]:
        """Return active reminders whose due date is on or before ``as_of``."""
        return [r for r in self.list() if r.is_due(as_of)]

    def get(self, reminder_id: int) -> Reminder:
        """Return the reminder with the given ID or raise NotFound."""
        try:
            return self._reminders[reminder_id]
        except KeyError:
            raise NotFound(reminder_id) from None

    def stats(self, as_of: date) -> ReminderStats:
        reminders = self.list()
        completed = sum(1 for r in reminders if r.completed)
        return ReminderStats(
            total=len(reminders),
            active=len(reminders) - completed,
            completed=completed,
            due=len(self.due(as_of)),
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, text: str, today: date) -> Reminder:
        """
        Create a new reminder, first due the day after ``today``.

        Raises:
            InvalidInput: ``text`` is empty or whitespace only.
            IoError: The new state could not be saved.
        """
        if not text or not text.strip():
            raise InvalidInput("Reminder text must not be empty")

        reminder = Reminder(
            id=self._next_id,
            text=text,
            created_at=today,
            next_due=first_due_date(today),
        )
        reminders = dict(self._reminders)
        reminders[reminder.id] = reminder
        self._commit(reminders, next_id=reminder.id + 1)

        logger.info("reminder_added", reminder_id=reminder.id, next_due=str(reminder.next_due))
        return reminder

    def review(self, reminder_id: int, as_of: date) -> Reminder:
        """
        Record a review and schedule the next one.

        Raises:
            NotFound: No reminder with that ID.
            AlreadyCompleted: The reminder has finished its schedule.
            IoError: The new state could not be saved.
        """
        updated = advance(self.get(reminder_id), as_of)
        reminders = dict(self._reminders)
        reminders[reminder_id] = updated
        self._commit(reminders)

        logger.info(
            "reminder_reviewed",
            reminder_id=reminder_id,
            review_count=updated.review_count,
            completed=updated.completed,
        )
        return updated

    def remove(self, reminder_id: int) -> Reminder:
        """
        Delete a reminder. Remaining reminders keep their IDs.

        Returns:
            The removed reminder.

        Raises:
            NotFound: No reminder with that ID.
            IoError: The new state could not be saved.
        """
        removed = self.get(reminder_id)
        reminders = dict(self._reminders)
        del reminders[reminder_id]
        self._commit(reminders)

        logger.info("reminder_removed", reminder_id=reminder_id)
        return removed

    def snapshot(self) -> ReminderSnapshot:
        """Return the current state in its persisted form."""
        return ReminderSnapshot(next_id=self._next_id, reminders=self.list())

    def _commit(self, reminders: Dict[int, Reminder], next_id: Optional[int] = None) -> None:
        """Save the new state, then adopt it. A failed save changes nothing."""
        next_id = next_id if next_id is not None else self._next_id
        self.repository.save(
            ReminderSnapshot(
                next_id=next_id,
                reminders=[reminders[i] for i in sorted(reminders)],
            )
        )
        self._reminders = reminders
        self._next_id = next_id
