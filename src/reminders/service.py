"""Run the reminder sync end to end."""

import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from src.observability.sentry import init_sentry
from src.paths import ENV_FILE
from src.reminders.config import ReminderSyncConfig, get_reminder_settings
from src.reminders.fetcher import TaskFetcher
from src.reminders.models import ReconcileResult
from src.reminders.reconciler import ReminderReconciler
from src.todoist.client import TodoistClient
from src.todoist.exceptions import TodoistClientError
from src.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def run_reminder_sync(
    settings: ReminderSyncConfig,
    client: TodoistClient | None = None,
) -> ReconcileResult:
    """Fetch qualifying tasks and create their missing reminders.

    :param settings: Reminder sync settings.
    :param client: Todoist client. Built from ``settings`` when omitted.
    :returns: Per-task reconciliation outcomes.
    :raises TodoistClientError: If any Todoist call fails.
    """
    if client is None:
        client = TodoistClient(token=settings.token, timeout=settings.request_timeout)

    fetcher = TaskFetcher(
        client,
        content_prefix=settings.content_prefix,
        include_completed=settings.include_completed,
    )
    reconciler = ReminderReconciler(
        client,
        reminder_timezone=settings.reminder_timezone,
        reminder_hour=settings.reminder_hour,
        dry_run=settings.dry_run,
    )

    tasks = fetcher.fetch_qualifying_tasks()
    return reconciler.reconcile(tasks)


def main() -> None:
    """Entry point for running the reminder sync once."""
    load_dotenv(ENV_FILE)
    configure_logging()
    init_sentry()

    try:
        settings = get_reminder_settings()
    except ValidationError:
        logger.exception("Invalid reminder sync configuration")
        sys.exit(1)

    try:
        run_reminder_sync(settings)
    except TodoistClientError:
        logger.exception("Error setting reminders for tasks")
        sys.exit(1)

    logger.info("Reminders set for tasks with due dates and no due time.")


if __name__ == "__main__":
    main()
