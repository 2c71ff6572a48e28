"""Process-wide session state owned by the interaction controller.

Workflows mutate the state only through the methods below, each of which
notifies listeners through ``changed``.
"""

import logging
from enum import Enum

from pdfqa.models.schemas import UploadedFileRecord
from pdfqa.session.signals import Signal
from pdfqa.session.transcript import TranscriptStore

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    """What the client is currently waiting on."""

    IDLE = "idle"
    UPLOADING = "uploading"
    QUERYING = "querying"


class SessionState:
    """Files, transcript, pending input, busy gate and last error.

    Attributes:
        transcript: The conversation log.
        changed: Fires on every change outside the transcript.
    """

    def __init__(self) -> None:
        self.transcript = TranscriptStore()
        self.changed = Signal("session")
        self._files: list[UploadedFileRecord] = []
        self._pending_input = ""
        self._phase = Phase.IDLE
        self._last_error: str | None = None

    @property
    def files(self) -> tuple[UploadedFileRecord, ...]:
        return tuple(self._files)

    @property
    def pending_input(self) -> str:
        return self._pending_input

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def busy(self) -> bool:
        return self._phase is not Phase.IDLE

    @property
    def last_error(self) -> str | None:
        return self._last_error

    def append_file(self, name: str) -> None:
        self._files.append(UploadedFileRecord(name=name))
        self.changed.emit()

    def begin(self, phase: Phase) -> None:
        """Mark a network workflow as started and clear the last error.

        Raises:
            RuntimeError: If another workflow is still in flight.
        """
        if phase is Phase.IDLE:
            raise ValueError("Cannot begin the idle phase")
        if self.busy:
            raise RuntimeError(f"Cannot start {phase.value} while {self._phase.value}")
        self._phase = phase
        self._last_error = None
        logger.debug(f"Session entered {phase.value}")
        self.changed.emit()

    def finish(self) -> None:
        """Release the busy gate."""
        self._phase = Phase.IDLE
        logger.debug("Session is idle")
        self.changed.emit()

    def set_error(self, message: str) -> None:
        self._last_error = message
        self.changed.emit()

    def set_pending_input(self, text: str) -> None:
        if text == self._pending_input:
            return
        self._pending_input = text
        self.changed.emit()

    def reset(self) -> None:
        """Return to the initial state: idle, no files, empty transcript."""
        self._files = []
        self._pending_input = ""
        self._phase = Phase.IDLE
        self._last_error = None
        self.transcript.clear()
        self.changed.emit()
