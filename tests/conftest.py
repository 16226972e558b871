import logging
import os
from datetime import date
from pathlib import Path

import pytest

# Keep tests independent of the developer's environment
for _key in list(os.environ):
    if _key.startswith("REMINDER_"):
        del os.environ[_key]
os.environ["REMINDER_LOG_LEVEL"] = "WARNING"


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings are cached per process; each test sees its own environment."""
    from reminder.core.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_handlers():
    """Undo handler changes made by setup_logging so tests never write to stale streams."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            if isinstance(h, logging.FileHandler):
                h.close()
    root.setLevel(saved_level)


@pytest.fixture
def day0() -> date:
    return date(2026, 1, 1)


@pytest.fixture
def memory_repo():
    """Empty in-memory repository."""
    from reminder.infrastructure.repositories import InMemoryReminderRepository

    return InMemoryReminderRepository()


@pytest.fixture
def store(memory_repo):
    """Reminder store backed by the in-memory repository."""
    from reminder.services.reminder_service import ReminderStore

    return ReminderStore(memory_repo)


@pytest.fixture
def data_file(tmp_path) -> Path:
    """Path for a reminder file that does not exist yet."""
    return tmp_path / "data" / "reminders.json"
