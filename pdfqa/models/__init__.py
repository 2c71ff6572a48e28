"""Request/response and transcript schemas.

Pydantic models for type safety and validation of backend payloads
and conversation turns.
"""

from pdfqa.models.schemas import (
    BotTurn,
    ConversationTurn,
    ErrorBody,
    FileHandle,
    QueryRequest,
    QueryResponse,
    SourceRef,
    UploadedFileRecord,
    UserTurn,
)

__all__ = [
    "BotTurn",
    "ConversationTurn",
    "ErrorBody",
    "FileHandle",
    "QueryRequest",
    "QueryResponse",
    "SourceRef",
    "UploadedFileRecord",
    "UserTurn",
]
