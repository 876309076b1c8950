"""Fetch the Todoist tasks the reminder sync is responsible for."""

import logging

from src.todoist.client import TodoistClient
from src.todoist.models import Task

logger = logging.getLogger(__name__)


class TaskFetcher:
    """Retrieve tasks and keep the ones marked for reminder handling."""

    def __init__(
        self,
        client: TodoistClient,
        *,
        content_prefix: str,
        include_completed: bool = False,
    ) -> None:
        """Initialise the fetcher.

        :param client: Todoist API client.
        :param content_prefix: Keep only tasks whose content starts with this.
        :param include_completed: Keep completed tasks as well.
        """
        self._client = client
        self._content_prefix = content_prefix
        self._include_completed = include_completed

    def is_qualifying(self, task: Task) -> bool:
        """Check whether a task belongs to this workflow.

        :param task: Task to check.
        :returns: True if the content carries the prefix and the task is
            not completed (unless completed tasks are included).
        """
        if not task.content.startswith(self._content_prefix):
            return False
        return self._include_completed or not task.is_completed

    def fetch_qualifying_tasks(self) -> list[Task]:
        """Fetch all tasks and filter them to this workflow.

        :returns: Qualifying tasks in the order Todoist returned them. Empty
            if none match.
        :raises TodoistClientError: If the tasks could not be listed or parsed.
        """
        tasks = self._client.list_items()
        qualifying = [task for task in tasks if self.is_qualifying(task)]

        logger.info(
            f"{len(qualifying)} of {len(tasks)} tasks match prefix '{self._content_prefix}'"
        )
        return qualifying
