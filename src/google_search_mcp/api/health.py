from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from .. import __version__
from ..config import Settings
from ..dependencies import get_app_settings

router = APIRouter(tags=["health"])

@router.get("/health")
async def health(settings: Settings = Depends(get_app_settings)):
    # Credentials were checked at startup, the provider is never called here
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "version": __version__,
        "mode": "streamable-http",
        "config": {
            "googleApiConfigured": True,
            "port": settings.PORT,
        },
    }
