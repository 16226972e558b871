"""
Fixed-step spaced repetition schedule.

Each review moves a reminder one step along a fixed table of intervals.
The next due date is measured from the day of the review, so reviewing
late does not push the delay into later steps.
"""

import logging
from datetime import date, timedelta
from typing import Dict, Optional

from reminder.domain.errors import AlreadyCompleted
from reminder.models.reminder import MAX_REVIEWS, Reminder

logger = logging.getLogger(__name__)

# Delay between creating a reminder and its first review
FIRST_REVIEW_DELAY = timedelta(days=1)

# Interval after a review, keyed by the review count *after* the review.
# "1 month" is a fixed 30-day span.
REVIEW_INTERVALS: Dict[int, timedelta] = {
    1: timedelta(days=3),
    2: timedelta(days=7),
    3: timedelta(days=30),
}


def interval_for(review_count: int) -> Optional[timedelta]:
    """Return the interval that follows the given review, or None once finished."""
    if review_count < 1 or review_count > MAX_REVIEWS:
        raise ValueError(f"review_count must be in 1..{MAX_REVIEWS}, got {review_count}")
    return REVIEW_INTERVALS.get(review_count)


def first_due_date(created_at: date) -> date:
    """Return the date a freshly added reminder first becomes due."""
    return created_at + FIRST_REVIEW_DELAY


def advance(record: Reminder, today: date) -> Reminder:
    """
    Apply one review to a reminder.

    Args:
        record: Reminder being reviewed
        today: Date of the review

    Returns:
        New Reminder with the review applied; the input is never modified.

    Raises:
        AlreadyCompleted: The reminder has already finished its schedule.
    """
    if record.completed:
        raise AlreadyCompleted(record.id)

    review_count = record.review_count + 1
    interval = interval_for(review_count)

    if interval is None:
        logger.debug("Reminder %s finished after %s reviews", record.id, review_count)
        return record.model_copy(update={"review_count": review_count, "completed": True})

    # next_due never moves backwards, even for a review dated before the schedule
    next_due = max(today + interval, record.next_due)
    return record.model_copy(update={"review_count": review_count, "next_due": next_due})
