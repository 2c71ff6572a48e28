"""Test package for the PDF Q&A client.

Structure:
    - unit/: Transcript, state, workflows and controller against a scripted backend
    - integration/: Full workflows against a FastAPI stand-in backend

Leverages pytest with pytest-check for soft assertions.
"""
