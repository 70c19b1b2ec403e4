from fastapi import APIRouter

from documind.core.clock import utcnow

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.get("/rpc/healthcheck")
async def healthcheck():
    """Проверка доступности RPC"""
    return {"status": "ok", "timestamp": utcnow().isoformat()}
