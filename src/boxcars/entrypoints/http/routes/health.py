from datetime import datetime, timezone

from fastapi import APIRouter

router = APIRouter(tags=["Health"])


@router.get("/health", summary="Liveness check")
def health() -> dict[str, str]:
    return {
        "status": "OK",
        "message": "BoxCars API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
