# app/__init__.py
"""
Package entrypoint for the FastAPI application.

This lets us run:
    uvicorn app:app --reload

and then seed the database with:
    curl http://127.0.0.1:8000/seed
"""

from .main import app

__all__ = ["app"]
