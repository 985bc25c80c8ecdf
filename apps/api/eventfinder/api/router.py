from datetime import datetime, timezone

from fastapi import APIRouter

from eventfinder.api.events import router as events_router

router = APIRouter()
router.include_router(events_router)


@router.get("/health")
def health():
    return {
        "success": True,
        "message": "API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
