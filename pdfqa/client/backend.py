"""HTTP client for the document Q&A backend.

Implements the two backend calls the client needs:
    - POST /upload/: multipart upload of a single file
    - POST /query/: JSON question, JSON answer with sources

Every failure is raised as one of the client error kinds so workflows
can handle them uniformly.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from pdfqa.errors import BackendFailure, MalformedResponse, TransportFailure
from pdfqa.models.schemas import ErrorBody, FileHandle, QueryRequest, QueryResponse

logger = logging.getLogger(__name__)

UPLOAD_PATH = "/upload/"
QUERY_PATH = "/query/"
DEFAULT_CONTENT_TYPE = "application/octet-stream"


class BackendClient:
    """Async client for the upload and query endpoints.

    A fresh ``httpx.AsyncClient`` is opened per request. No timeout is
    enforced; requests run until the transport or backend ends them.
    """

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the backend client.

        Args:
            base_url: Root URL of the backend, e.g. ``http://localhost:8000``.
            transport: Optional transport override (used by tests).
        """
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            transport=self._transport,
            timeout=None,
        )

    async def upload_file(self, file: FileHandle) -> Any:
        """Upload one file.

        Args:
            file: The file to send as the ``file`` multipart field.

        Returns:
            The decoded JSON body of the backend's response.

        Raises:
            TransportFailure: If the backend cannot be reached.
            BackendFailure: On a non-2xx status.
            MalformedResponse: If the body is not JSON.
        """
        files = {"file": (file.name, file.content, file.content_type or DEFAULT_CONTENT_TYPE)}
        response = await self._post(UPLOAD_PATH, files=files)
        return _decode_json(response)

    async def query(self, question: str) -> QueryResponse:
        """Ask one question.

        Args:
            question: The question text, sent as-is.

        Returns:
            The parsed response, guaranteed to carry a non-empty answer.

        Raises:
            TransportFailure: If the backend cannot be reached.
            BackendFailure: On a non-2xx status.
            MalformedResponse: If the body is not JSON, does not match the
                response schema, or has no answer.
        """
        payload = QueryRequest(query=question).model_dump()
        response = await self._post(QUERY_PATH, json=payload)
        data = _decode_json(response)

        try:
            parsed = QueryResponse.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Query response failed validation: {e}")
            raise MalformedResponse("Unexpected response format from server") from e

        if not parsed.answer:
            raise MalformedResponse("No answer received from server")
        return parsed

    async def _post(self, path: str, **kwargs: Any) -> httpx.Response:
        async with self._client() as client:
            try:
                response = await client.post(path, **kwargs)
            except httpx.RequestError as e:
                raise TransportFailure(f"Connection failed: {str(e) or type(e).__name__}") from e

        if not response.is_success:
            raise BackendFailure(response.status_code, _error_detail(response))
        return response


def _decode_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise MalformedResponse("Invalid JSON response from server") from e


def _error_detail(response: httpx.Response) -> str | None:
    """Extract the backend's ``detail`` string from an error response."""
    try:
        return ErrorBody.model_validate(response.json()).detail
    except ValueError:
        return None
