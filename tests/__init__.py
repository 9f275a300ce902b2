# tests/__init__.py
"""
Test suite for the Estate back-office API.

Organization:
- top level: services, crypto helpers and configuration, run against an
  in-memory SQLite database.
- `http_api`: end-to-end tests through the FastAPI TestClient.
"""
