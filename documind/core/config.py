from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./documind.db"
    sql_echo: bool = False
    create_tables: bool = True

    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # Demo user standing in for authentication
    seed_demo_user: bool = True
    demo_user_email: str = "user@example.com"
    demo_user_name: str = "Demo User"

    # Remote AI engine; the template generator is used when unset
    ai_engine_url: Optional[str] = None
    ai_engine_timeout: float = 30.0

    # Client side
    autosave_delay: float = 2.0
    offline_fallback: bool = False

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
