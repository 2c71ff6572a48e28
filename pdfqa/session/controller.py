"""Interaction controller wiring user events to the upload and query workflows.

The controller owns the ``SessionState`` and enforces the busy gate: while an
upload batch or a query is in flight, further uploads and queries are ignored,
never queued. The check and the start of the workflow happen before the first
await, so on a single event loop no two network operations overlap.
"""

import logging
from collections.abc import Sequence

from pdfqa.client.backend import BackendClient
from pdfqa.models.schemas import BotTurn, ConversationTurn, FileHandle, UploadedFileRecord
from pdfqa.session.query import QuerySession
from pdfqa.session.state import Phase, SessionState
from pdfqa.session.uploads import BatchResult, UploadOrchestrator

logger = logging.getLogger(__name__)


class InteractionController:
    """Idle/Uploading/Querying state machine for one chat session."""

    def __init__(
        self,
        backend: BackendClient,
        state: SessionState | None = None,
    ) -> None:
        self.state = state or SessionState()
        self._uploads = UploadOrchestrator(backend)
        self._queries = QuerySession(backend)

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def busy(self) -> bool:
        return self.state.busy

    @property
    def files(self) -> tuple[UploadedFileRecord, ...]:
        return self.state.files

    @property
    def transcript(self) -> tuple[ConversationTurn, ...]:
        return self.state.transcript.turns

    @property
    def last_error(self) -> str | None:
        return self.state.last_error

    @property
    def pending_input(self) -> str:
        return self.state.pending_input

    @property
    def can_upload(self) -> bool:
        return not self.busy

    @property
    def can_submit(self) -> bool:
        """Whether the question form accepts a submission right now."""
        return not self.busy and bool(self.state.files) and bool(self.pending_input.strip())

    def set_pending_input(self, text: str | None) -> None:
        self.state.set_pending_input(text or "")

    async def upload(self, files: Sequence[FileHandle]) -> BatchResult | None:
        """Upload a batch of files, unless another workflow is running.

        Returns:
            The batch outcome, or None if the request was ignored.
        """
        if self.busy:
            logger.debug(f"Ignoring upload of {len(files)} file(s) while {self.phase.value}")
            return None
        return await self._uploads.upload_batch(self.state, files)

    async def submit(self, question: str | None = None) -> BotTurn | None:
        """Submit ``question`` (defaults to the pending input).

        Returns:
            The resulting bot turn, or None if the submission was ignored.
        """
        if self.busy:
            logger.debug(f"Ignoring query while {self.phase.value}")
            return None
        if question is None:
            question = self.pending_input
        return await self._queries.submit_query(self.state, question)

    def clear(self) -> None:
        """Clear the chat. Files and the busy gate are left untouched."""
        self.state.transcript.clear()
