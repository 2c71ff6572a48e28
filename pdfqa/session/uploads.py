"""Sequential batch upload with first-failure-aborts semantics.

Files are uploaded one at a time in picker order. The first failure ends
the batch: later files are never attempted, earlier successes are kept,
nothing is retried.
"""

import logging
from collections.abc import Sequence

from pydantic import BaseModel, Field

from pdfqa.client.backend import BackendClient
from pdfqa.errors import ClientError, Operation, describe_failure
from pdfqa.models.schemas import FileHandle
from pdfqa.session.state import Phase, SessionState

logger = logging.getLogger(__name__)


class BatchResult(BaseModel):
    """Outcome of one upload batch.

    Attributes:
        uploaded: Names confirmed by the backend, in upload order.
        failed: Name of the file whose upload ended the batch.
        skipped: Names never attempted because the batch was aborted.
        error: User-facing failure message.
    """

    uploaded: list[str] = Field(default_factory=list)
    failed: str | None = None
    skipped: list[str] = Field(default_factory=list)
    error: str | None = None

    @property
    def aborted(self) -> bool:
        return self.failed is not None

    def abort(self, failed: str, error: str, remaining: list[str]) -> None:
        """Stop the batch at ``failed``; ``remaining`` files are never sent."""
        self.failed = failed
        self.error = error
        self.skipped = remaining


class UploadOrchestrator:
    """Uploads batches of files against the backend.

    Holds no state between calls; every effect lands on the given
    ``SessionState``.
    """

    def __init__(self, backend: BackendClient) -> None:
        self._backend = backend

    async def upload_batch(
        self, state: SessionState, files: Sequence[FileHandle]
    ) -> BatchResult:
        """Upload ``files`` one after another.

        Args:
            state: Session to record successes and errors on.
            files: Files in the order the picker presented them.

        Returns:
            BatchResult describing what was uploaded, failed and skipped.
        """
        result = BatchResult()
        state.begin(Phase.UPLOADING)
        try:
            for position, file in enumerate(files):
                try:
                    body = await self._backend.upload_file(file)
                except ClientError as e:
                    message = describe_failure(Operation.UPLOAD, e)
                    logger.warning(f"Upload of {file.name} failed: {e}")
                    state.set_error(message)
                    result.abort(file.name, message, [f.name for f in files[position + 1 :]])
                    break

                logger.info(f"Upload response for {file.name}: {body}")
                state.append_file(file.name)
                result.uploaded.append(file.name)
        finally:
            state.finish()

        if result.skipped:
            logger.info(f"Upload batch aborted, skipped {len(result.skipped)} file(s)")
        return result
