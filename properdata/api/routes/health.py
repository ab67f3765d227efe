from datetime import datetime, timezone

from fastapi import APIRouter

from ...config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    """Liveness plus the configured backing file; does not open it."""
    settings = get_settings()
    path = settings.properties_path
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.APP_VERSION,
        "properties_path": str(path),
        "properties_file_exists": path.is_file(),
        "separator": settings.PROPERDATA_SEPARATOR.token,
    }
