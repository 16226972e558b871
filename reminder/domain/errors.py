"""
Typed domain errors for the reminder tool.

Every failure mode the store or its persistence layer can hit has its own
class so the command surface can map each to a specific message and exit
code instead of inspecting strings.
"""

from pathlib import Path
from typing import Union


class DomainError(Exception):
    """Base class for all domain-specific errors."""


# ---------------------------------------------------------------------------
# Store operations
# ---------------------------------------------------------------------------


class InvalidInput(DomainError):
    """User-supplied input was rejected (e.g. empty reminder text)."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class NotFound(DomainError):
    """No reminder exists with the given ID."""

    def __init__(self, reminder_id: int) -> None:
        self.reminder_id = reminder_id
        super().__init__(f"Reminder with ID {reminder_id} not found")


class AlreadyCompleted(DomainError):
    """Review was requested for a reminder that has finished its schedule."""

    def __init__(self, reminder_id: int) -> None:
        self.reminder_id = reminder_id
        super().__init__(f"Reminder {reminder_id} is already completed")


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------


class PersistenceError(DomainError):
    """Base class for failures reading or writing persisted state."""

    def __init__(self, path: Union[str, Path, None], message: str) -> None:
        self.path = str(path) if path is not None else None
        super().__init__(message)


class CorruptState(PersistenceError):
    """Persisted state exists but cannot be parsed or fails validation."""

    def __init__(self, path: Union[str, Path, None], detail: str) -> None:
        self.detail = detail
        super().__init__(path, f"Could not parse reminder file {path}: {detail}")


class IoError(PersistenceError):
    """Persisted state could not be read or written."""

    def __init__(self, path: Union[str, Path, None], detail: str) -> None:
        self.detail = detail
        super().__init__(path, f"Could not access reminder file {path}: {detail}")
