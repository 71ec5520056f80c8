"""V1 API router — aggregates all endpoint routers."""

from fastapi import APIRouter

from app.presentation.api.v1.endpoints.health import router as health_router
from app.presentation.api.v1.endpoints.questions import router as questions_router

router = APIRouter()
router.include_router(health_router)
router.include_router(questions_router)
