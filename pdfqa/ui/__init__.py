"""NiceGUI interface - thin visualization layer for the Q&A session.

Responsibilities:
    - Sidebar with PDF upload, clear chat, uploaded files and last error
    - Chat transcript with sources and a busy indicator
    - Question input gated by the session's busy flag

Contains no workflow logic. Subscribes to the session's change signals
and redraws from its state.
"""
