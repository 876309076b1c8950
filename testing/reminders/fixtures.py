"""Shared builders for reminder sync tests."""

from src.todoist.exceptions import RemoteServiceError
from src.todoist.models import Due, Reminder, ReminderAddResult, Task


def make_task(
    task_id: str,
    content: str = "Test Reminder: task",
    *,
    due_date: str | None = None,
    due_datetime: str | None = None,
    is_completed: bool = False,
) -> Task:
    """Build a Task with an optional due descriptor."""
    due = Due(date=due_date, datetime=due_datetime) if due_date is not None else None
    return Task(id=task_id, content=content, is_completed=is_completed, due=due)


def make_reminder(
    reminder_id: str,
    item_id: str,
    *,
    reminder_type: str = "absolute",
    is_deleted: bool = False,
) -> Reminder:
    """Build a Reminder attached to a task."""
    return Reminder(id=reminder_id, item_id=item_id, type=reminder_type, is_deleted=is_deleted)


class FakeTodoistClient:
    """In-memory stand-in for TodoistClient holding remote state.

    ``add_reminder`` stores an absolute reminder so later listings see it.
    Set ``fail_on_item`` to make creating a reminder for that task fail.
    """

    def __init__(self, tasks: list[Task], reminders: list[Reminder] | None = None) -> None:
        self.tasks = list(tasks)
        self.reminders = list(reminders or [])
        self.added: list[tuple[str, str, str]] = []
        self.list_reminders_calls = 0
        self.fail_on_item: str | None = None

    def list_items(self) -> list[Task]:
        return list(self.tasks)

    def list_reminders(self) -> list[Reminder]:
        self.list_reminders_calls += 1
        return list(self.reminders)

    def add_reminder(self, item_id: str, due_date: str, timezone: str) -> ReminderAddResult:
        if item_id == self.fail_on_item:
            raise RemoteServiceError(500, f"cannot add reminder to {item_id}")
        self.added.append((item_id, due_date, timezone))
        reminder_id = f"r-{len(self.reminders) + 1}"
        self.reminders.append(make_reminder(reminder_id, item_id))
        return ReminderAddResult(
            temp_id=f"t-{reminder_id}", uuid=f"u-{reminder_id}", reminder_id=reminder_id
        )
