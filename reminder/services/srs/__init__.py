"""
SRS (Spaced Repetition System) Module
Fixed-step review schedule for reminders
"""

from .interval_schedule import (
    FIRST_REVIEW_DELAY,
    REVIEW_INTERVALS,
    advance,
    first_due_date,
    interval_for,
)

__all__ = [
    "FIRST_REVIEW_DELAY",
    "REVIEW_INTERVALS",
    "advance",
    "first_due_date",
    "interval_for",
]
