"""API route registration for Hunk Label."""

from fastapi import APIRouter

from . import hunks, labels, meta, session

router = APIRouter()
router.include_router(meta.router)
router.include_router(session.router)
router.include_router(labels.router)
router.include_router(hunks.router)

__all__ = ["router"]
