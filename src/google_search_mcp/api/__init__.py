from fastapi import APIRouter
from .transport import router as transport_router
from .health import router as health_router

router = APIRouter()
router.include_router(transport_router)
router.include_router(health_router)
