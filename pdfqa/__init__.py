"""PDF Q&A Client - upload documents and ask questions answered against them.

Combines httpx for backend calls, NiceGUI for visualization,
and Pydantic for data validation.

Components:
    - client: HTTP adapter for the document Q&A backend
    - session: Transcript store, upload orchestrator, query session, controller
    - ui: Web interface for chat interactions
    - models: Request/response and transcript schemas
"""

__version__ = "0.1.0"
