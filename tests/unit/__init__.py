"""Unit tests for individual components in isolation.

Coverage:
    - errors: Failure message formatting
    - session/: Transcript store, session state, uploads, queries, controller
    - client/: Backend HTTP client against httpx.MockTransport
    - config and ui formatting helpers

Leverages pytest-check for multiple assertions per test.
"""
