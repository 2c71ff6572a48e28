"""Text helpers for rendering session state in the chat page."""

from collections.abc import Sequence

from pdfqa.models.schemas import SourceRef
from pdfqa.session.state import Phase

STATUS_MESSAGES = {
    Phase.UPLOADING: "Uploading...",
    Phase.QUERYING: "Typing...",
}


def format_sources(sources: Sequence[SourceRef] | None) -> str:
    """Render citations as ``Sources: a.pdf (Page 3), b.pdf (Page 7)``.

    Returns an empty string when there is nothing to cite.
    """
    if not sources:
        return ""
    refs = ", ".join(f"{s.filename} (Page {s.page})" for s in sources)
    return f"Sources: {refs}"


def status_text(phase: Phase) -> str:
    return STATUS_MESSAGES.get(phase, "")
