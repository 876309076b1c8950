"""Pydantic models for Todoist Sync API data."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from src.todoist.enums import ReminderType


class Due(BaseModel):
    """Due information attached to a task or reminder.

    The Sync API encodes a timed due date as ``date="YYYY-MM-DDTHH:MM:SS"``
    while other payloads carry a separate ``datetime`` field. Both shapes are
    normalised so that ``date`` is always the calendar date and ``datetime``
    is set only when a due time exists.
    """

    model_config = ConfigDict(extra="ignore")

    date: str = Field(..., description="Calendar date (YYYY-MM-DD)")
    datetime: str | None = Field(None, description="Full due timestamp, if a time is set")
    is_recurring: bool = Field(default=False)
    string: str = Field(default="", description="Human readable due text")
    timezone: str | None = Field(None)

    @model_validator(mode="after")
    def _split_timed_date(self) -> "Due":
        if not self.datetime and "T" in self.date:
            self.datetime = self.date
            self.date = self.date.split("T", 1)[0]
        return self

    @property
    def has_time(self) -> bool:
        """Whether an explicit due time is set."""
        return bool(self.datetime)


class Task(BaseModel):
    """A Todoist task (an "item" in Sync API terms).

    Only ``id``, ``content``, ``is_completed`` and ``due`` are interpreted;
    the rest is carried through as returned by Todoist.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str = Field(..., min_length=1, description="Todoist task ID")
    content: str = Field(default="")
    description: str = Field(default="")
    is_completed: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_completed", "checked"),
    )
    due: Due | None = Field(None)
    project_id: str | None = Field(None)
    section_id: str | None = Field(None)
    parent_id: str | None = Field(None)
    priority: int = Field(default=1)
    order: int = Field(default=0, validation_alias=AliasChoices("order", "child_order"))
    labels: list[str] = Field(default_factory=list)
    creator_id: str | None = Field(
        None,
        validation_alias=AliasChoices("creator_id", "added_by_uid"),
    )
    assignee_id: str | None = Field(
        None,
        validation_alias=AliasChoices("assignee_id", "responsible_uid"),
    )
    assigner_id: str | None = Field(
        None,
        validation_alias=AliasChoices("assigner_id", "assigned_by_uid"),
    )
    created_at: str | None = Field(
        None,
        validation_alias=AliasChoices("created_at", "added_at"),
    )
    comment_count: int = Field(default=0)
    url: str | None = Field(None)


class Reminder(BaseModel):
    """A reminder attached to a Todoist task."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str = Field(..., min_length=1, description="Todoist reminder ID")
    item_id: str = Field(..., min_length=1, description="ID of the task the reminder belongs to")
    type: str = Field(..., description="Reminder kind, e.g. absolute or location")
    due: Due | None = Field(None)
    is_deleted: bool = Field(default=False)
    minute_offset: int | None = Field(None)
    notify_uid: str | None = Field(None)

    @field_validator("is_deleted", mode="before")
    @classmethod
    def _coerce_deleted_flag(cls, value: object) -> object:
        # Todoist sends 0/1; anything non-zero counts as deleted.
        if value is None:
            return False
        if isinstance(value, int):
            return value != 0
        return value

    @property
    def is_active_absolute(self) -> bool:
        """Whether this is a time-based reminder that has not been deleted."""
        return self.type == ReminderType.ABSOLUTE and not self.is_deleted

    def qualifies_for(self, task_id: str) -> bool:
        """Check whether this reminder already covers the given task.

        :param task_id: Todoist task ID.
        :returns: True for a live absolute reminder attached to the task.
        """
        return self.item_id == task_id and self.is_active_absolute


class ReminderAddResult(BaseModel):
    """Outcome of a successful ``reminder_add`` command."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    temp_id: str = Field(..., min_length=1)
    uuid: str = Field(..., min_length=1, description="Idempotency token sent with the command")
    reminder_id: str | None = Field(None, description="Real reminder ID from temp_id_mapping")
