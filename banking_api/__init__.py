"""
Top‑level package for the Banking API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``banking_api.app.main:app``.
"""

__all__ = []
