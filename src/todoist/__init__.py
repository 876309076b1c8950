"""Todoist Sync API client and models."""

from src.todoist.client import TodoistClient
from src.todoist.enums import ReminderType, ResourceType
from src.todoist.exceptions import (
    DecodeError,
    InvalidResponseError,
    RemoteServiceError,
    TodoistClientError,
    TransportError,
)
from src.todoist.models import Due, Reminder, ReminderAddResult, Task

__all__ = [
    "DecodeError",
    "Due",
    "InvalidResponseError",
    "Reminder",
    "ReminderAddResult",
    "ReminderType",
    "RemoteServiceError",
    "ResourceType",
    "Task",
    "TodoistClient",
    "TodoistClientError",
    "TransportError",
]
