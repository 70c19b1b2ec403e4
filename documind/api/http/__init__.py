from documind.api.http.health import router as health_router
from documind.api.http.users import router as users_router
from documind.api.http.documents import router as documents_router
from documind.api.http.sources import router as sources_router
from documind.api.http.assistance import router as assistance_router

__all__ = [
    "health_router",
    "users_router",
    "documents_router",
    "sources_router",
    "assistance_router"
]
