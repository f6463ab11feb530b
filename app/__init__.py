# app/__init__.py
"""
Package entrypoint for the FastAPI application.

This lets us run:
    uvicorn app:create_app --factory --reload
"""

from .main import create_app

__all__ = ["create_app"]
