from datetime import datetime

from fastapi import APIRouter

router = APIRouter()


def _health_payload() -> dict[str, str]:
    return {
        "status": "healthy",
        "service": "finance-flow",
        "timestamp": datetime.now().isoformat(),
    }


@router.get("/health")
async def health() -> dict[str, str]:
    return _health_payload()


@router.get("/api/health")
async def api_health() -> dict[str, str]:
    return _health_payload()
