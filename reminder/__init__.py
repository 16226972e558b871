"""Fixed-step spaced repetition reminders."""
