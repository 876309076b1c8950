"""Enum definitions for the Todoist Sync API."""

from enum import StrEnum


class ResourceType(StrEnum):
    """Resource types that can be requested from the sync endpoint."""

    ITEMS = "items"
    REMINDERS = "reminders"


class ReminderType(StrEnum):
    """Kinds of reminder Todoist supports."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"
    LOCATION = "location"


class CommandType(StrEnum):
    """Sync API command names used by this project."""

    REMINDER_ADD = "reminder_add"
