"""ReminderRepository protocol: the persistence contract for the store."""

from typing import Protocol, runtime_checkable

from reminder.models.reminder import ReminderSnapshot


@runtime_checkable
class ReminderRepository(Protocol):
    """Repository interface for loading and saving the reminder collection."""

    def load(self) -> ReminderSnapshot:
        """Load the persisted reminders.

        Returns:
            The stored snapshot, or an empty one if nothing was saved yet.

        Raises:
            CorruptState: Stored data exists but cannot be parsed.
            IoError: Stored data could not be read.
        """
        ...

    def save(self, snapshot: ReminderSnapshot) -> None:
        """Persist the full reminder collection, replacing what was stored.

        Raises:
            IoError: The write failed.
        """
        ...
