"""Reminder sync for Todoist tasks with a date-only due date.

Run once with: python -m src.reminders
"""

from src.reminders.config import ReminderSyncConfig, get_reminder_settings
from src.reminders.fetcher import TaskFetcher
from src.reminders.inspector import ReminderInspector, ReminderSnapshot
from src.reminders.models import ReconcileResult, TaskOutcome, TaskResult
from src.reminders.reconciler import ReminderReconciler, build_reminder_time, needs_reminder

__all__ = [
    "ReconcileResult",
    "ReminderInspector",
    "ReminderReconciler",
    "ReminderSnapshot",
    "ReminderSyncConfig",
    "TaskFetcher",
    "TaskOutcome",
    "TaskResult",
    "build_reminder_time",
    "get_reminder_settings",
    "needs_reminder",
]
