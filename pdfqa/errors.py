"""Client error taxonomy and failure message formatting.

Every workflow failure is converted to a user-facing string by
``describe_failure`` so message formatting lives in one place.
"""

from collections.abc import Callable
from enum import Enum


class Operation(str, Enum):
    """Workflow that produced a failure."""

    UPLOAD = "Upload"
    QUERY = "Query"


class ClientError(Exception):
    """Base class for errors raised by the client core."""


class InvalidInput(ClientError):
    """Raised when a question is blank or whitespace-only."""


class TransportFailure(ClientError):
    """Raised when the backend cannot be reached."""


class BackendFailure(ClientError):
    """Raised when the backend answers with a non-2xx status.

    Attributes:
        status_code: HTTP status returned by the backend.
        detail: Backend-supplied ``detail`` string, if any.
    """

    def __init__(self, status_code: int, detail: str | None = None) -> None:
        super().__init__(detail or f"HTTP {status_code}")
        self.status_code = status_code
        self.detail = detail


class MalformedResponse(ClientError):
    """Raised when a 2xx response body is unusable."""


def _backend_message(error: ClientError, operation: Operation) -> str:
    return getattr(error, "detail", None) or f"{operation.value} failed"


def _plain_message(error: ClientError, operation: Operation) -> str:
    return str(error) or f"{operation.value} failed"


_MESSAGE_RULES: dict[type[ClientError], Callable[[ClientError, Operation], str]] = {
    BackendFailure: _backend_message,
    TransportFailure: _plain_message,
    MalformedResponse: _plain_message,
}


def describe_failure(operation: Operation, error: ClientError) -> str:
    """Build the user-facing message for a failed workflow.

    Args:
        operation: Workflow that failed.
        error: The failure raised by the backend client.

    Returns:
        Message of the form ``"<Operation> failed: <message>"``.
    """
    rule = _MESSAGE_RULES.get(type(error), _plain_message)
    return f"{operation.value} failed: {rule(error, operation)}"
