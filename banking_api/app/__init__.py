"""
Application package.

``core`` holds configuration, logging, errors, the in‑memory store and
security dependencies; ``schemas`` the Pydantic entities; ``services``
validation and business logic; ``api`` the HTTP routes.  Routes only
talk to services, and services only talk to the store.
"""

from .main import app, create_app  # noqa: F401
