"""Inspect existing Todoist reminders.

Todoist only lists reminders for the whole account, so a per-task check
costs one full listing. ``ReminderInspector.snapshot`` lists once and
answers any number of per-task checks locally.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from src.todoist.client import TodoistClient
from src.todoist.models import Reminder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReminderSnapshot:
    """Task IDs that carried a qualifying reminder when the snapshot was taken."""

    covered_task_ids: frozenset[str]

    @classmethod
    def from_reminders(cls, reminders: Iterable[Reminder]) -> "ReminderSnapshot":
        """Build a snapshot from a list of reminders.

        :param reminders: Reminders as returned by Todoist.
        :returns: Snapshot keyed by task ID.
        """
        return cls(
            covered_task_ids=frozenset(
                reminder.item_id for reminder in reminders if reminder.is_active_absolute
            )
        )

    def covers(self, task_id: str) -> bool:
        """Check whether the task had a qualifying reminder."""
        return task_id in self.covered_task_ids


class ReminderInspector:
    """Answer whether tasks already carry a live absolute reminder."""

    def __init__(self, client: TodoistClient) -> None:
        """Initialise the inspector.

        :param client: Todoist API client.
        """
        self._client = client

    def has_qualifying_reminder(self, task_id: str) -> bool:
        """Check a single task against the current reminder list.

        :param task_id: Todoist task ID.
        :returns: True if any reminder is absolute, not deleted and attached to the task.
        :raises TodoistClientError: If reminders could not be listed or parsed.
        """
        found = any(reminder.qualifies_for(task_id) for reminder in self._client.list_reminders())
        logger.debug(f"Task {task_id} has qualifying reminder: {found}")
        return found

    def snapshot(self) -> ReminderSnapshot:
        """List reminders once and index the tasks they cover.

        :returns: Snapshot of the current remote reminder state.
        :raises TodoistClientError: If reminders could not be listed or parsed.
        """
        snapshot = ReminderSnapshot.from_reminders(self._client.list_reminders())
        logger.info(f"{len(snapshot.covered_task_ids)} tasks already have an absolute reminder")
        return snapshot
