from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from documind.core.config import settings


def get_async_db_url(url: str) -> str:
    """Приводит URL базы данных к асинхронному драйверу"""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    if url.startswith("postgresql+psycopg2://"):
        return url.replace("postgresql+psycopg2://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


def make_engine(url: str, echo: bool = False, **kwargs) -> AsyncEngine:
    """Создание асинхронного движка; для SQLite включаются внешние ключи"""
    engine = create_async_engine(get_async_db_url(url), echo=echo, future=True, **kwargs)

    if engine.dialect.name == "sqlite":
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def make_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


# Асинхронный движок
engine = make_engine(settings.database_url, echo=settings.sql_echo)

# Сессии
SessionLocal = make_session_factory(engine)


# Функция для dependency injection в FastAPI
async def get_db():
    async with SessionLocal() as session:
        yield session


async def init_models(bind: AsyncEngine = engine) -> None:
    """Создание таблиц по метаданным моделей"""
    from documind.db.base import Base
    import documind.db.models  # noqa: F401  регистрация моделей

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
