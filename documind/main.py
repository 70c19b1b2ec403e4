import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from documind.api.errors import register_exception_handlers
from documind.api.http import (
    assistance_router, documents_router, health_router, sources_router, users_router
)
from documind.core.config import settings
from documind.core.db import SessionLocal, init_models
from documind.core.logging import setup_logging
from documind.domains.identity.services import IdentityService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.create_tables:
        await init_models()

    if settings.seed_demo_user:
        async with SessionLocal() as session:
            user = await IdentityService(session).ensure_user(
                settings.demo_user_email, settings.demo_user_name
            )
        logger.info(f"Demo user ready: {user.email} (id={user.id})")

    yield


def create_app() -> FastAPI:
    setup_logging(settings.log_level)

    app = FastAPI(
        title="DocuMind",
        description="Document editor with sources and AI writing assistance",
        version="1.0.0",
        lifespan=lifespan
    )

    # Настройка CORS для работы с frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(users_router)
    app.include_router(documents_router)
    app.include_router(sources_router)
    app.include_router(assistance_router)

    @app.get("/")
    async def root():
        """Корневой эндпоинт"""
        return {
            "message": "DocuMind API",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health"
        }

    return app


app = create_app()
