"""HTTP adapter for the document Q&A backend.

Wraps httpx and translates transport errors, non-2xx statuses and unusable
bodies into the client error taxonomy.
"""

from pdfqa.client.backend import BackendClient

__all__ = ["BackendClient"]
