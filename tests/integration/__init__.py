"""Integration tests for components working together as a system.

Coverage:
    - Upload and query workflows through real multipart/JSON encoding
    - Backend error details flowing into the session state and transcript

Runs against an in-process FastAPI backend over httpx ASGITransport.
No network or external services required.
"""
