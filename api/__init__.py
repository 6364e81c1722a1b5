"""
HTTP API for the customer list.

This package provides a single FastAPI application that exposes:
- Batch append and list endpoints under /Customer
- A health check
"""

from api.main import app, create_app

__all__ = ["app", "create_app"]
