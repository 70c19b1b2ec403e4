from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.orm import declarative_base

from documind.core.clock import utcnow

# Базовый класс для моделей
Base = declarative_base()


class BaseModel(Base):
    """Общие колонки: целочисленный ключ и время создания"""

    __abstract__ = True

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
