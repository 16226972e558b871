from .reminder_repository import ReminderRepository

__all__ = ["ReminderRepository"]
