"""
Top‑level API router.

This router aggregates the area routers under the ``/api`` prefix
applied by the application factory.  When new areas are introduced,
include their routers here.
"""

from fastapi import APIRouter

from .routes import admin, auth, health, transactions, users

router = APIRouter()

router.include_router(health.router, tags=["service"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
