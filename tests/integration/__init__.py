"""
Integration tests for contractdrift entry points.

These tests drive the real CLI (as a subprocess) and the real FastAPI app
(through TestClient) over small specification and traffic documents.
"""
