"""Append-only conversation transcript.

The rendering layer re-derives the whole visible chat from ``turns`` on every
``changed`` notification, so existing turns are never mutated or removed.
Only ``clear`` drops them, all at once.
"""

import logging
from collections.abc import Iterator, Sequence

from pdfqa.errors import InvalidInput
from pdfqa.models.schemas import BotTurn, ConversationTurn, SourceRef, UserTurn
from pdfqa.session.signals import Signal

logger = logging.getLogger(__name__)


class TranscriptStore:
    """Ordered log of user questions and bot answers."""

    def __init__(self) -> None:
        self._turns: list[ConversationTurn] = []
        self.changed = Signal("transcript")

    @property
    def turns(self) -> tuple[ConversationTurn, ...]:
        """Snapshot of all turns in creation order."""
        return tuple(self._turns)

    def append_user(self, content: str) -> int:
        """Append a user question.

        Args:
            content: The question exactly as submitted.

        Returns:
            Index of the new turn.

        Raises:
            InvalidInput: If the question is blank.
        """
        if not content.strip():
            raise InvalidInput("Question must not be empty")
        return self._append(UserTurn(content=content))

    def append_bot(self, content: str, sources: Sequence[SourceRef] | None = None) -> int:
        """Append an answer, or an error message when ``sources`` is None.

        Returns:
            Index of the new turn.
        """
        return self._append(
            BotTurn(content=content, sources=None if sources is None else tuple(sources))
        )

    def clear(self) -> None:
        """Drop every turn. Uploaded files are not affected."""
        self._turns = []
        logger.debug("Transcript cleared")
        self.changed.emit()

    def _append(self, turn: ConversationTurn) -> int:
        # Listeners may clear the transcript, so the index is taken first.
        self._turns.append(turn)
        index = len(self._turns) - 1
        self.changed.emit()
        return index

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[ConversationTurn]:
        return iter(tuple(self._turns))

    def __getitem__(self, index: int) -> ConversationTurn:
        return self._turns[index]
