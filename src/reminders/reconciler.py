"""Reconcile Todoist tasks against their reminders.

A task gets a new reminder when it has a due date without a due time and no
live absolute reminder. The decision is re-derived from remote state on every
run, so rerunning after a partial failure is safe.
"""

import logging
from collections.abc import Container, Sequence

from src.reminders.inspector import ReminderInspector
from src.reminders.models import ReconcileResult, TaskOutcome, TaskResult
from src.todoist.client import TodoistClient
from src.todoist.models import Task

logger = logging.getLogger(__name__)

DEFAULT_REMINDER_HOUR = 8


def build_reminder_time(due_date: str, hour: int = DEFAULT_REMINDER_HOUR) -> str:
    """Build the reminder time for a date-only due date.

    :param due_date: Calendar date as YYYY-MM-DD.
    :param hour: Local hour of the day (0-23).
    :returns: Reminder time as "YYYY-MM-DD HH:00:00".
    """
    return f"{due_date} {hour:02d}:00:00"


def _date_only_due(task: Task) -> str | None:
    """Return the task's due date if it has one and no due time."""
    if task.due is None or not task.due.date or task.due.has_time:
        return None
    return task.due.date


def needs_reminder(task: Task, covered_task_ids: Container[str]) -> bool:
    """Decide whether a task should be given a reminder.

    :param task: Task to check.
    :param covered_task_ids: IDs of tasks that already have a qualifying reminder.
    :returns: True if the task is due on a date, has no due time and is not covered.
    """
    return _date_only_due(task) is not None and task.id not in covered_task_ids


class ReminderReconciler:
    """Create missing reminders for a sequence of tasks.

    Tasks are processed in the order given, each exactly once. The first
    error aborts the run; reminders created before it are kept.
    """

    def __init__(
        self,
        client: TodoistClient,
        *,
        reminder_timezone: str,
        reminder_hour: int = DEFAULT_REMINDER_HOUR,
        dry_run: bool = False,
        inspector: ReminderInspector | None = None,
    ) -> None:
        """Initialise the reconciler.

        :param client: Todoist API client used to create reminders.
        :param reminder_timezone: IANA timezone sent with every reminder.
        :param reminder_hour: Local hour the reminder fires at.
        :param dry_run: Record decisions without creating reminders.
        :param inspector: Reminder inspector. Defaults to one using ``client``.
        """
        self._client = client
        self._reminder_timezone = reminder_timezone
        self._reminder_hour = reminder_hour
        self._dry_run = dry_run
        self._inspector = inspector or ReminderInspector(client)

    def reconcile(self, tasks: Sequence[Task]) -> ReconcileResult:
        """Create a reminder for every task that needs one.

        Reminders are listed once, when the first task with a date-only due
        date is reached.

        :param tasks: Tasks to reconcile, usually from ``TaskFetcher``.
        :returns: Per-task outcomes.
        :raises TodoistClientError: On the first failed Todoist call. Later
            tasks are not processed.
        """
        result = ReconcileResult(dry_run=self._dry_run)
        covered: set[str] | None = None

        for task in tasks:
            due_date = _date_only_due(task)
            if due_date is None:
                logger.debug(f"Skipping task {task.id}: no date-only due date")
                result.results.append(
                    TaskResult(task_id=task.id, outcome=TaskOutcome.SKIPPED_INELIGIBLE)
                )
                continue

            if covered is None:
                covered = set(self._inspector.snapshot().covered_task_ids)

            if not needs_reminder(task, covered):
                logger.debug(f"Skipping task {task.id}: reminder already exists")
                result.results.append(
                    TaskResult(task_id=task.id, outcome=TaskOutcome.SKIPPED_HAS_REMINDER)
                )
                continue

            result.results.append(self._create_reminder(task, due_date))
            covered.add(task.id)

        mode = " (dry run)" if self._dry_run else ""
        logger.info(
            f"Reconciliation complete{mode}: {result.tasks_checked} tasks, "
            f"{result.reminders_created} reminders created, "
            f"{result.skipped_has_reminder} already covered, "
            f"{result.skipped_ineligible} ineligible"
        )
        return result

    def _create_reminder(self, task: Task, due_date: str) -> TaskResult:
        reminder_time = build_reminder_time(due_date, self._reminder_hour)

        if self._dry_run:
            logger.info(f"Dry run: would add reminder to task {task.id} at {reminder_time}")
            return TaskResult(
                task_id=task.id,
                outcome=TaskOutcome.REMINDER_CREATED,
                reminder_time=reminder_time,
            )

        added = self._client.add_reminder(task.id, reminder_time, self._reminder_timezone)
        logger.info(f"Added reminder to task {task.id} at {reminder_time}")
        return TaskResult(
            task_id=task.id,
            outcome=TaskOutcome.REMINDER_CREATED,
            reminder_time=reminder_time,
            reminder_id=added.reminder_id,
        )
