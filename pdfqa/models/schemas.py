"""Pydantic models for backend payloads and the conversation transcript.

Models:
    - SourceRef: Citation pointer returned with an answer
    - QueryRequest: Outgoing question payload
    - QueryResponse: Answer payload with optional sources
    - ErrorBody: Error payload of a non-2xx response
    - FileHandle: Raw bytes and name of a user-selected file
    - UploadedFileRecord: A file the backend confirmed
    - UserTurn / BotTurn: Conversation turns
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class SourceRef(BaseModel):
    """A citation pointer returned by the backend.

    Attributes:
        filename: Name of the cited document.
        page: Page number within the document.
    """

    model_config = ConfigDict(frozen=True)

    filename: str
    page: int


class QueryRequest(BaseModel):
    """Request payload for the query endpoint."""

    query: str = Field(..., description="The user's question")


class QueryResponse(BaseModel):
    """Response from the query endpoint.

    Attributes:
        answer: Generated answer. Absent or empty means no answer.
        sources: Cited document pages, if any.
    """

    answer: str | None = None
    sources: list[SourceRef] | None = None


class ErrorBody(BaseModel):
    """Body of a non-2xx backend response."""

    detail: str | None = None


class FileHandle(BaseModel):
    """A user-selected file ready to be uploaded.

    Attributes:
        name: Display name of the file.
        content: Raw file bytes.
        content_type: MIME type reported by the file picker.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    content: bytes
    content_type: str | None = None


class UploadedFileRecord(BaseModel):
    """A file the backend has confirmed as uploaded."""

    model_config = ConfigDict(frozen=True)

    name: str


class UserTurn(BaseModel):
    """A question as the user submitted it."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user"] = "user"
    content: str


class BotTurn(BaseModel):
    """An answer, or an error surfaced in the chat.

    Error turns carry no sources; answers carry a (possibly empty) tuple.
    """

    model_config = ConfigDict(frozen=True)

    role: Literal["bot"] = "bot"
    content: str
    sources: tuple[SourceRef, ...] | None = None

    @property
    def is_error(self) -> bool:
        return self.sources is None


ConversationTurn = Annotated[UserTurn | BotTurn, Field(discriminator="role")]
