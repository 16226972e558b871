"""
Text formatting utilities for command output.

Contains:
- Reminder text truncation
- Relative due-date descriptions ("in 3 days", "2 days ago")
- Status labels
"""

from datetime import date
from typing import Optional

from reminder.models.reminder import Reminder

ELLIPSIS = "..."


def trim_text(text: str, max_len: Optional[int] = None) -> str:
    """Truncate text to ``max_len`` characters, appending an ellipsis if cut."""
    if max_len is None or len(text) <= max_len:
        return text
    return text[:max_len] + ELLIPSIS


def format_relative_date(target: date, today: date) -> str:
    """Describe ``target`` relative to ``today`` in whole days."""
    days = (target - today).days
    if days == 0:
        return "today"
    if days == 1:
        return "tomorrow"
    if days == -1:
        return "yesterday"
    if days > 0:
        return f"in {days} days"
    return f"{-days} days ago"


def format_status(reminder: Reminder) -> str:
    return "✓ Completed" if reminder.completed else "⏳ Active"
