"""Single question/answer cycle against the backend.

One submission produces exactly one request and exactly one bot turn,
either the answer or the error that prevented it.
"""

import logging

from pdfqa.client.backend import BackendClient
from pdfqa.errors import ClientError, Operation, describe_failure
from pdfqa.models.schemas import BotTurn
from pdfqa.session.state import Phase, SessionState

logger = logging.getLogger(__name__)


class QuerySession:
    """Turns a pending question into a transcript entry."""

    def __init__(self, backend: BackendClient) -> None:
        self._backend = backend

    async def submit_query(self, state: SessionState, question: str) -> BotTurn | None:
        """Ask ``question`` and record the outcome.

        Blank questions are ignored without touching the state. Failures are
        recorded as ``last_error`` and as a bot turn carrying the same message.

        Args:
            state: Session to record the exchange on.
            question: Question text, recorded untrimmed.

        Returns:
            The bot turn appended for this question, or None if ignored.
        """
        if not question.strip():
            return None

        state.begin(Phase.QUERYING)
        transcript = state.transcript
        try:
            transcript.append_user(question)
            state.set_pending_input("")
            logger.info(f"Sending query: {question!r}")

            try:
                response = await self._backend.query(question)
            except ClientError as e:
                message = describe_failure(Operation.QUERY, e)
                logger.warning(f"Query failed: {e}")
                state.set_error(message)
                turn = BotTurn(content=message)
            else:
                logger.info(f"Query answered with {len(response.sources or [])} source(s)")
                turn = BotTurn(
                    content=response.answer or "", sources=tuple(response.sources or ())
                )
            transcript.append_bot(turn.content, turn.sources)
        finally:
            state.finish()

        return turn
