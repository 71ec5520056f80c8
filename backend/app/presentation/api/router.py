"""Top-level API router.

Routes are mounted at the root (``/rooms/...``, ``/health``), the paths
existing clients already call.
"""

from fastapi import APIRouter

from app.presentation.api.v1.router import router as v1_router

router = APIRouter()
router.include_router(v1_router)
