"""
ASGI entry point for running the contact form outside Lambda.

Run with:
    uvicorn asgi:app --reload
"""

from app import create_app

app = create_app()
