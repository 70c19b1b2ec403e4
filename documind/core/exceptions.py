from typing import Any, Optional


class DocuMindError(Exception):
    """Базовая ошибка приложения"""

    code = "ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DocuMindError):
    """Родительская сущность не существует"""

    code = "NOT_FOUND"

    def __init__(self, entity: str, entity_id: Optional[Any] = None, message: Optional[str] = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message or f"{entity} not found")


class ConflictError(DocuMindError):
    """Нарушение ограничения уникальности"""

    code = "CONFLICT"
