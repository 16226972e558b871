"""
Command line interface for the reminder tool.

Usage:
    reminder add "Learn X"
    reminder check
    reminder list
    reminder review 1
    reminder remove 1
"""

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from reminder.core.config import (
    Settings,
    describe_settings_error,
    get_data_file_path,
    get_settings,
    get_today,
)
from reminder.domain.errors import (
    AlreadyCompleted,
    InvalidInput,
    NotFound,
    PersistenceError,
)
from reminder.infrastructure.repositories import JsonReminderRepository
from reminder.models.reminder import Reminder
from reminder.services.reminder_service import ReminderStore
from reminder.utils.formatting import format_relative_date, format_status, trim_text
from reminder.utils.logging import get_logger, setup_logging

console = Console(highlight=False, emoji=False)
err_console = Console(stderr=True, highlight=False, emoji=False)
logger = get_logger(__name__)

app = typer.Typer(help="A spaced repetition reminder system", no_args_is_help=True)

EXIT_USER_ERROR = 1
# 2 is reserved for usage errors reported by click
EXIT_STORAGE_ERROR = 3
EXIT_CONFIG_ERROR = 4


@dataclass
class CommandContext:
    """Per-invocation state shared by every command."""

    settings: Settings
    data_file: Path
    today: date
    trim: Optional[int]
    _store: Optional[ReminderStore] = None

    @property
    def store(self) -> ReminderStore:
        """Load the store on first use; storage failures abort the command."""
        if self._store is None:
            try:
                self._store = ReminderStore(JsonReminderRepository(self.data_file))
            except PersistenceError as e:
                _storage_failure(e)
        return self._store


def _storage_failure(error: PersistenceError) -> NoReturn:
    logger.warning("storage_error", path=error.path, error=str(error))
    err_console.print(f"Error: {escape(str(error))}")
    err_console.print("Your reminder file has not been modified.")
    raise typer.Exit(code=EXIT_STORAGE_ERROR)


def _user_error(error: Exception) -> NoReturn:
    logger.info("command_rejected", error_type=type(error).__name__, error=str(error))
    err_console.print(f"Error: {escape(str(error))}")
    raise typer.Exit(code=EXIT_USER_ERROR)


def _display(ctx: CommandContext, reminder: Reminder) -> str:
    return escape(trim_text(reminder.text, ctx.trim))


@app.callback()
def main(
    ctx: typer.Context,
    trim: Optional[int] = typer.Option(
        None, "--trim", min=1, metavar="NUMBER", help="Trim reminder text to NUMBER characters"
    ),
    data_file: Optional[Path] = typer.Option(
        None, "--data-file", help="Reminder file to use instead of the configured one"
    ),
):
    """A spaced repetition reminder system."""
    try:
        settings = get_settings()
    except ValidationError as e:
        err_console.print(f"Error: invalid configuration: {escape(describe_settings_error(e))}")
        raise typer.Exit(code=EXIT_CONFIG_ERROR)
    setup_logging(settings.log_level, settings.log_to_file, settings.log_dir)

    ctx.obj = CommandContext(
        settings=settings,
        data_file=data_file.expanduser() if data_file else get_data_file_path(settings),
        today=get_today(settings),
        trim=trim if trim is not None else settings.trim,
    )


@app.command()
def add(
    ctx: typer.Context,
    content: str = typer.Argument(..., metavar="CONTENT", help="The content to remember"),
):
    """Add a new reminder."""
    cmd: CommandContext = ctx.obj
    try:
        reminder = cmd.store.add(content, cmd.today)
    except InvalidInput as e:
        _user_error(e)
    except PersistenceError as e:
        _storage_failure(e)

    console.print(f'Added reminder with ID {reminder.id}: "{_display(cmd, reminder)}"')
    console.print(f"Next review: {format_relative_date(reminder.next_due, cmd.today)}")


def _check(ctx: typer.Context):
    cmd: CommandContext = ctx.obj
    due_reminders = cmd.store.due(cmd.today)

    if not due_reminders:
        console.print("No reminders due for review!")
        return

    console.print("Reminders due for review:")
    console.print("=" * 50)
    for reminder in due_reminders:
        console.print(f"ID: {reminder.id}")
        console.print(f"Content: {_display(cmd, reminder)}")
        console.print(f"Review count: {reminder.review_count}")
        console.print(f"Due: {format_relative_date(reminder.next_due, cmd.today)}")
        console.print("-" * 30)
    console.print("\nUse 'reminder review <ID>' to mark a reminder as reviewed")


@app.command()
def check(ctx: typer.Context):
    """Check for due reminders."""
    _check(ctx)


@app.command("due", hidden=True)
def due(ctx: typer.Context):
    """Alias for check."""
    _check(ctx)


@app.command("list")
def list_reminders(ctx: typer.Context):
    """List all reminders."""
    cmd: CommandContext = ctx.obj
    reminders = cmd.store.list()

    if not reminders:
        console.print("No reminders found!")
        return

    console.print("All reminders:")
    console.print("=" * 70)
    for reminder in reminders:
        console.print(
            f"ID: {reminder.id} | {format_status(reminder)} | Reviews: {reminder.review_count}"
        )
        console.print(f"Content: {_display(cmd, reminder)}")
        if not reminder.completed:
            console.print(
                f"Next review: {format_relative_date(reminder.next_due, cmd.today)}"
            )
        console.print("-" * 50)


@app.command()
def review(
    ctx: typer.Context,
    reminder_id: int = typer.Argument(..., metavar="ID", help="The ID of the reminder to mark as reviewed"),
):
    """Mark a reminder as reviewed."""
    cmd: CommandContext = ctx.obj
    try:
        reminder = cmd.store.review(reminder_id, cmd.today)
    except (NotFound, AlreadyCompleted) as e:
        _user_error(e)
    except PersistenceError as e:
        _storage_failure(e)

    if reminder.completed:
        console.print(f"Reminder {reminder.id} completed! 🎉")
        console.print(f"You've successfully reviewed this {reminder.review_count} times.")
    else:
        console.print(f"Reminder {reminder.id} reviewed!")
        console.print(f"Next review: {format_relative_date(reminder.next_due, cmd.today)}")


@app.command()
def remove(
    ctx: typer.Context,
    reminder_id: int = typer.Argument(..., metavar="ID", help="The ID of the reminder to remove"),
):
    """Remove a reminder."""
    cmd: CommandContext = ctx.obj
    try:
        cmd.store.remove(reminder_id)
    except NotFound as e:
        _user_error(e)
    except PersistenceError as e:
        _storage_failure(e)

    console.print(f"Reminder {reminder_id} removed successfully")


@app.command()
def stats(ctx: typer.Context):
    """Show reminder counts."""
    cmd: CommandContext = ctx.obj
    counts = cmd.store.stats(cmd.today)

    table = Table(title="Reminders")
    table.add_column("Status")
    table.add_column("Count", justify="right")
    table.add_row("Total", str(counts.total))
    table.add_row("Active", str(counts.active))
    table.add_row("Due today", str(counts.due))
    table.add_row("Completed", str(counts.completed))
    console.print(table)


@app.command()
def version():
    """Show the version."""
    from reminder.version import __version__

    console.print(f"reminder {__version__}")


if __name__ == "__main__":
    app()
