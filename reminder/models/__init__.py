from .reminder import MAX_REVIEWS, Reminder, ReminderSnapshot

__all__ = [
    "MAX_REVIEWS",
    "Reminder",
    "ReminderSnapshot",
]
