from .json_reminder_repository import JsonReminderRepository
from .memory_reminder_repository import InMemoryReminderRepository

__all__ = [
    "JsonReminderRepository",
    "InMemoryReminderRepository",
]
