"""Parser functions for Todoist Sync API responses.

Responses are parsed all-or-nothing: a missing top-level field or a single
record that fails validation rejects the whole response.
"""

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from src.todoist.enums import ResourceType
from src.todoist.exceptions import DecodeError, InvalidResponseError, RemoteServiceError
from src.todoist.models import Reminder, ReminderAddResult, Task

ModelT = TypeVar("ModelT", bound=BaseModel)

SYNC_STATUS_OK = "ok"


def _extract_records(payload: dict[str, Any], field: str) -> list[Any]:
    """Pull a list of raw records out of a sync response."""
    records = payload.get(field)
    if not isinstance(records, list):
        raise InvalidResponseError(
            f"Invalid response from Todoist API: '{field}' is missing or not a list"
        )
    return records


def _parse_records(records: list[Any], model: type[ModelT], field: str) -> list[ModelT]:
    """Validate every raw record against a model."""
    parsed: list[ModelT] = []
    for index, record in enumerate(records):
        try:
            parsed.append(model.model_validate(record))
        except ValidationError as e:
            raise DecodeError(f"Failed to decode {field}[{index}] from Todoist API: {e}") from e
    return parsed


def parse_tasks(payload: dict[str, Any]) -> list[Task]:
    """Parse the ``items`` resource of a sync response into tasks.

    :param payload: Decoded JSON body of a sync response.
    :returns: Parsed tasks, in response order.
    :raises InvalidResponseError: If ``items`` is missing or not a list.
    :raises DecodeError: If any item fails validation.
    """
    field = ResourceType.ITEMS.value
    return _parse_records(_extract_records(payload, field), Task, field)


def parse_reminders(payload: dict[str, Any]) -> list[Reminder]:
    """Parse the ``reminders`` resource of a sync response.

    :param payload: Decoded JSON body of a sync response.
    :returns: Parsed reminders, in response order.
    :raises InvalidResponseError: If ``reminders`` is missing or not a list.
    :raises DecodeError: If any reminder fails validation.
    """
    field = ResourceType.REMINDERS.value
    return _parse_records(_extract_records(payload, field), Reminder, field)


def parse_reminder_add(
    payload: dict[str, Any],
    *,
    command_uuid: str,
    temp_id: str,
    status_code: int,
) -> ReminderAddResult:
    """Parse the response to a ``reminder_add`` command.

    :param payload: Decoded JSON body of the command response.
    :param command_uuid: The uuid the command was sent with.
    :param temp_id: The temp_id the command was sent with.
    :param status_code: HTTP status of the response, reported on rejection.
    :returns: The command result with the real reminder ID when Todoist returned one.
    :raises RemoteServiceError: If Todoist rejected the command.
    :raises InvalidResponseError: If ``sync_status`` or ``temp_id_mapping`` is malformed.
    """
    sync_status = payload.get("sync_status")
    if sync_status is not None:
        if not isinstance(sync_status, dict):
            raise InvalidResponseError(
                "Invalid response from Todoist API: 'sync_status' is not an object"
            )
        command_status = sync_status.get(command_uuid)
        if command_status is not None and command_status != SYNC_STATUS_OK:
            raise RemoteServiceError(status_code, json.dumps(command_status))

    mapping = payload.get("temp_id_mapping") or {}
    if not isinstance(mapping, dict):
        raise InvalidResponseError(
            "Invalid response from Todoist API: 'temp_id_mapping' is not an object"
        )

    return ReminderAddResult(temp_id=temp_id, uuid=command_uuid, reminder_id=mapping.get(temp_id))
