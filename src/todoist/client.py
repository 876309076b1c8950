"""Todoist Sync API client for reading tasks and reminders and adding reminders."""

import json
import logging
import os
import uuid
from typing import Any

import requests

from src.todoist.enums import CommandType, ReminderType, ResourceType
from src.todoist.exceptions import (
    DecodeError,
    InvalidResponseError,
    RemoteServiceError,
    TransportError,
)
from src.todoist.models import Reminder, ReminderAddResult, Task
from src.todoist.parser import parse_reminder_add, parse_reminders, parse_tasks

logger = logging.getLogger(__name__)

# Todoist API timeout in seconds
REQUEST_TIMEOUT = 30

# Sync token that requests a full (non-incremental) sync
FULL_SYNC_TOKEN = "*"


class TodoistClient:
    """Client for the Todoist Sync API.

    Every operation is a single form-encoded POST to the sync endpoint.
    """

    BASE_URL = "https://api.todoist.com/sync/v9"

    def __init__(self, *, token: str | None = None, timeout: int = REQUEST_TIMEOUT) -> None:
        """Initialise the Todoist client.

        :param token: Todoist API token. If not provided, reads from
            TODOIST_TOKEN environment variable.
        :param timeout: Per-request timeout in seconds.
        :raises ValueError: If token is not provided and not found in environment.
        """
        self._token = token or os.environ.get("TODOIST_TOKEN")

        if not self._token:
            raise ValueError(
                "Todoist API token not provided. Set TODOIST_TOKEN "
                "environment variable or pass token parameter."
            )

        self._timeout = timeout
        logger.debug("TodoistClient initialised")

    @property
    def _headers(self) -> dict[str, str]:
        """Headers for Todoist API requests.

        :returns: Dictionary of required headers.
        """
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/x-www-form-urlencoded",
        }

    def _post(self, form: dict[str, str]) -> tuple[int, dict[str, Any]]:
        """Make a POST request to the sync endpoint.

        :param form: Form fields to send.
        :returns: Tuple of (status code, decoded JSON body).
        :raises TransportError: If no response was received.
        :raises RemoteServiceError: If the response status is not 2xx.
        :raises DecodeError: If the body is not a JSON object.
        """
        url = f"{self.BASE_URL}/sync"
        logger.debug(f"Making POST request to {url} with fields={sorted(form)}")

        try:
            response = requests.post(url, headers=self._headers, data=form, timeout=self._timeout)
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Todoist API request timed out after {self._timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Todoist API request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise RemoteServiceError(response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(f"Todoist API returned a body that is not JSON: {e}") from e

        if not isinstance(payload, dict):
            raise InvalidResponseError("Invalid response from Todoist API: body is not an object")

        return response.status_code, payload

    def sync(self, resource_types: list[ResourceType]) -> dict[str, Any]:
        """Run a full sync for the given resource types.

        :param resource_types: Resources to include in the response.
        :returns: Decoded sync response.
        :raises TodoistClientError: If the request fails.
        """
        form = {
            "sync_token": FULL_SYNC_TOKEN,
            "resource_types": json.dumps([str(resource) for resource in resource_types]),
        }
        _, payload = self._post(form)
        return payload

    def list_items(self) -> list[Task]:
        """List all active tasks.

        :returns: Every task returned by a full items sync.
        :raises TodoistClientError: If the request fails or the response is malformed.
        """
        logger.info("Listing Todoist tasks")
        tasks = parse_tasks(self.sync([ResourceType.ITEMS]))
        logger.info(f"Retrieved {len(tasks)} tasks from Todoist")
        return tasks

    def list_reminders(self) -> list[Reminder]:
        """List all reminders for the account.

        The sync endpoint cannot scope reminders to a single task.

        :returns: Every reminder returned by a full reminders sync.
        :raises TodoistClientError: If the request fails or the response is malformed.
        """
        logger.info("Listing Todoist reminders")
        reminders = parse_reminders(self.sync([ResourceType.REMINDERS]))
        logger.info(f"Retrieved {len(reminders)} reminders from Todoist")
        return reminders

    def add_reminder(self, item_id: str, due_date: str, timezone: str) -> ReminderAddResult:
        """Add an absolute reminder to a task.

        Each call sends a fresh command uuid so Todoist never treats two
        separate calls as one.

        :param item_id: Task to attach the reminder to.
        :param due_date: Reminder time as "YYYY-MM-DD HH:MM:SS".
        :param timezone: IANA timezone the reminder time is expressed in.
        :returns: The command result.
        :raises TodoistClientError: If the request fails or Todoist rejects the command.
        """
        command_uuid = str(uuid.uuid4())
        temp_id = str(uuid.uuid4())
        command = {
            "type": CommandType.REMINDER_ADD.value,
            "temp_id": temp_id,
            "uuid": command_uuid,
            "args": {
                "item_id": item_id,
                "type": ReminderType.ABSOLUTE.value,
                "due": {"date": due_date, "timezone": timezone},
            },
        }

        logger.info(f"Adding reminder to task {item_id} at {due_date} ({timezone})")
        status_code, payload = self._post({"commands": json.dumps([command])})
        return parse_reminder_add(
            payload,
            command_uuid=command_uuid,
            temp_id=temp_id,
            status_code=status_code,
        )
