"""REST API presentation layer for Dinely.

This package provides a FastAPI-based REST API for the user service.

Structure:
    api/
    ├── app.py                 # FastAPI application factory
    ├── dependencies.py        # Dependency injection
    ├── exception_handlers.py  # Exception to HTTP response mapping
    ├── routers/               # API route handlers
    └── schemas/               # Pydantic request/response schemas
"""

from dinely.presentation.api.app import create_app

__all__ = ["create_app"]
