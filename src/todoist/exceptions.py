"""Custom exceptions for the Todoist API client."""


class TodoistClientError(Exception):
    """Base class for all Todoist API client failures."""

    pass


class TransportError(TodoistClientError):
    """Raised when a request could not be sent or no response was received.

    Covers connection failures, timeouts and request construction errors.
    """

    pass


class RemoteServiceError(TodoistClientError):
    """Raised when Todoist answers with a non-2xx status or rejects a command.

    :param status_code: HTTP status code of the response.
    :param body: Raw response body, or the rejected command's error payload.
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Todoist API request failed: {status_code} - {body}")


class DecodeError(TodoistClientError):
    """Raised when a response body does not match the expected structure."""

    pass


class InvalidResponseError(DecodeError):
    """Raised when a required top-level field is missing or has the wrong type."""

    pass
