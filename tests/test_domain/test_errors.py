"""
Tests for typed domain errors.

Verifies that each error class inherits correctly and carries the
attributes the command surface uses for its messages.
"""


class TestDomainErrorHierarchy:
    """All domain errors inherit from a common base."""

    def test_base_error_exists(self):
        from reminder.domain.errors import DomainError

        assert issubclass(DomainError, Exception)

    def test_base_error_carries_message(self):
        from reminder.domain.errors import DomainError

        err = DomainError("something broke")
        assert str(err) == "something broke"


class TestStoreErrors:
    """Errors raised by store operations."""

    def test_invalid_input(self):
        from reminder.domain.errors import DomainError, InvalidInput

        assert issubclass(InvalidInput, DomainError)
        err = InvalidInput("Reminder text must not be empty")
        assert err.reason == "Reminder text must not be empty"
        assert "empty" in str(err)

    def test_not_found(self):
        from reminder.domain.errors import DomainError, NotFound

        assert issubclass(NotFound, DomainError)
        err = NotFound(reminder_id=99)
        assert err.reminder_id == 99
        assert "99" in str(err)

    def test_already_completed(self):
        from reminder.domain.errors import AlreadyCompleted, DomainError

        assert issubclass(AlreadyCompleted, DomainError)
        err = AlreadyCompleted(reminder_id=3)
        assert err.reminder_id == 3
        assert "completed" in str(err)


class TestPersistenceErrors:
    """Errors raised by repositories."""

    def test_corrupt_state(self):
        from reminder.domain.errors import CorruptState, PersistenceError

        assert issubclass(CorruptState, PersistenceError)
        err = CorruptState("/tmp/reminders.json", "bad json")
        assert err.path == "/tmp/reminders.json"
        assert err.detail == "bad json"
        assert "/tmp/reminders.json" in str(err)

    def test_io_error(self):
        from reminder.domain.errors import IoError, PersistenceError

        assert issubclass(IoError, PersistenceError)
        err = IoError("/tmp/reminders.json", "disk full")
        assert "disk full" in str(err)

    def test_io_error_is_not_builtin_oserror(self):
        from reminder.domain.errors import DomainError, IoError

        assert issubclass(IoError, DomainError)
        assert not issubclass(IoError, OSError)
