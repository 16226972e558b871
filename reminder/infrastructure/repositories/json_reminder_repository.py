"""JSON file implementation of ReminderRepository."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from reminder.domain.errors import CorruptState, IoError
from reminder.models.reminder import ReminderSnapshot

logger = logging.getLogger(__name__)


class JsonReminderRepository:
    """Concrete ReminderRepository backed by a single JSON file.

    Writes go to a temporary file in the same directory which is then
    renamed over the target, so readers see either the old or the new
    snapshot and never a partial one. Concurrent writers are not
    coordinated: the last one to finish wins.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> ReminderSnapshot:
        """Load the snapshot, or return an empty one if the file does not exist."""
        if not self.path.exists():
            logger.debug("No reminder file at %s, starting empty", self.path)
            return ReminderSnapshot()

        try:
            content = self.path.read_bytes()
        except OSError as e:
            raise IoError(self.path, str(e)) from e

        try:
            snapshot = ReminderSnapshot.model_validate_json(content)
        except ValidationError as e:
            raise CorruptState(self.path, f"{e.error_count()} validation error(s)") from e
        except UnicodeDecodeError as e:
            raise CorruptState(self.path, "file is not valid UTF-8") from e

        logger.debug(
            "Loaded %d reminders from %s (next_id=%d)",
            len(snapshot.reminders),
            self.path,
            snapshot.next_id,
        )
        return snapshot

    def save(self, snapshot: ReminderSnapshot) -> None:
        """Write the snapshot to disk, creating the parent directory if needed."""
        content = snapshot.model_dump_json(indent=2)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                f.write(content)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise IoError(self.path, str(e)) from e

        logger.debug("Saved %d reminders to %s", len(snapshot.reminders), self.path)
