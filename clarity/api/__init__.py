from fastapi import APIRouter

from clarity.api.reports import router as reports_router
from clarity.api.routes import router as app_router

router = APIRouter()
router.include_router(app_router)
router.include_router(reports_router)

__all__ = ["router"]
