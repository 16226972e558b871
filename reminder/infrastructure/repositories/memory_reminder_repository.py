"""In-memory implementation of ReminderRepository."""

from typing import Optional

from reminder.domain.errors import IoError
from reminder.models.reminder import ReminderSnapshot


class InMemoryReminderRepository:
    """ReminderRepository that keeps the snapshot in memory.

    The snapshot is stored in serialized form so that, like the JSON file,
    nothing the caller holds is shared with what was saved. Set
    ``fail_saves`` to make every save raise IoError.
    """

    def __init__(self, snapshot: Optional[ReminderSnapshot] = None) -> None:
        self._stored: Optional[str] = (
            snapshot.model_dump_json() if snapshot is not None else None
        )
        self.fail_saves = False
        self.save_count = 0

    def load(self) -> ReminderSnapshot:
        if self._stored is None:
            return ReminderSnapshot()
        return ReminderSnapshot.model_validate_json(self._stored)

    def save(self, snapshot: ReminderSnapshot) -> None:
        if self.fail_saves:
            raise IoError("<memory>", "save disabled")
        self._stored = snapshot.model_dump_json()
        self.save_count += 1
