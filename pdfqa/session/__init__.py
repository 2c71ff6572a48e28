"""Client-side session core.

Responsibilities:
    - Transcript store: append-only log of user and bot turns
    - Upload orchestrator: sequential batch uploads, first failure aborts
    - Query session: one question, one request, one bot turn
    - Interaction controller: busy gate over both workflows

Contains no presentation logic. Changes are announced through signals
so any rendering layer can subscribe.
"""

from pdfqa.errors import (
    BackendFailure,
    ClientError,
    InvalidInput,
    MalformedResponse,
    Operation,
    TransportFailure,
    describe_failure,
)
from pdfqa.session.controller import InteractionController
from pdfqa.session.query import QuerySession
from pdfqa.session.signals import Signal
from pdfqa.session.state import Phase, SessionState
from pdfqa.session.transcript import TranscriptStore
from pdfqa.session.uploads import BatchResult, UploadOrchestrator

__all__ = [
    "BackendFailure",
    "BatchResult",
    "ClientError",
    "InteractionController",
    "InvalidInput",
    "MalformedResponse",
    "Operation",
    "Phase",
    "QuerySession",
    "SessionState",
    "Signal",
    "TranscriptStore",
    "TransportFailure",
    "UploadOrchestrator",
    "describe_failure",
]
