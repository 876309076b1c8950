"""Pydantic models for reminder reconciliation results."""

from enum import StrEnum

from pydantic import BaseModel, Field


class TaskOutcome(StrEnum):
    """What reconciliation did with a single task."""

    SKIPPED_HAS_REMINDER = "skipped_has_reminder"
    SKIPPED_INELIGIBLE = "skipped_ineligible"
    REMINDER_CREATED = "reminder_created"


class TaskResult(BaseModel):
    """Reconciliation outcome for one task."""

    task_id: str = Field(..., min_length=1)
    outcome: TaskOutcome
    reminder_time: str | None = Field(None, description="Reminder time sent, if one was created")
    reminder_id: str | None = Field(None, description="ID Todoist assigned to the new reminder")


class ReconcileResult(BaseModel):
    """Result of one reconciliation run."""

    results: list[TaskResult] = Field(default_factory=list)
    dry_run: bool = False

    def _count(self, outcome: TaskOutcome) -> int:
        return sum(1 for result in self.results if result.outcome == outcome)

    @property
    def tasks_checked(self) -> int:
        """Number of tasks processed."""
        return len(self.results)

    @property
    def reminders_created(self) -> int:
        """Number of tasks given a new reminder (or that would be, in a dry run)."""
        return self._count(TaskOutcome.REMINDER_CREATED)

    @property
    def skipped_has_reminder(self) -> int:
        """Number of tasks that already had a qualifying reminder."""
        return self._count(TaskOutcome.SKIPPED_HAS_REMINDER)

    @property
    def skipped_ineligible(self) -> int:
        """Number of tasks without a date-only due date."""
        return self._count(TaskOutcome.SKIPPED_INELIGIBLE)
