import re
from datetime import datetime, timedelta
from typing import Optional

from documind.core.clock import utcnow

_TAG_RE = re.compile(r"<[^>]*>")
_TICK = timedelta(microseconds=1)

UNTITLED_TITLE = "Untitled Document"


def strip_tags(content: str) -> str:
    """Удаление HTML-тегов из содержимого"""
    return _TAG_RE.sub("", content)


def count_words(text: str) -> int:
    return len(text.split())


class Document:
    """Сущность документа домена Documents"""

    def __init__(
        self,
        id: Optional[int],
        title: str,
        content: str = "",
        user_id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.title = title
        self.content = content
        self.user_id = user_id
        self.created_at = created_at or utcnow()
        self.updated_at = updated_at or self.created_at

    def apply_update(self, title: Optional[str] = None, content: Optional[str] = None) -> None:
        """Частичное обновление: меняются только переданные поля, updated_at обновляется всегда"""
        if title is not None:
            self.title = title
        if content is not None:
            self.content = content
        self.touch()

    def touch(self) -> None:
        # updated_at строго возрастает даже при грубом разрешении часов
        self.updated_at = max(utcnow(), self.updated_at + _TICK)

    def get_plain_text(self) -> str:
        return strip_tags(self.content)

    def get_word_count(self) -> int:
        """Количество слов в тексте без HTML-разметки"""
        return count_words(self.get_plain_text())

    @classmethod
    def create_document(cls, title: str, user_id: int, content: str = "") -> "Document":
        """Создание нового документа; created_at и updated_at совпадают"""
        return cls(id=None, title=title, content=content, user_id=user_id)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Document(id={self.id}, title={self.title}, user_id={self.user_id})"
