"""
Top‑level API router.

Aggregates the resource routers under a unified ``/api`` prefix.  When a
new resource is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
