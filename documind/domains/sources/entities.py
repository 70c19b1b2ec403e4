import enum
from datetime import datetime
from typing import Optional

from documind.core.clock import utcnow


class SourceType(str, enum.Enum):
    URL = "url"
    FILE = "file"
    TEXT = "text"


class Source:
    """Справочный материал, прикрепленный к документу"""

    def __init__(
        self,
        id: Optional[int],
        document_id: int,
        title: str,
        content: str,
        source_type: SourceType,
        source_url: Optional[str] = None,
        created_at: Optional[datetime] = None
    ):
        self.id = id
        self.document_id = document_id
        self.title = title
        self.content = content
        self.source_type = SourceType(source_type)
        self.source_url = source_url
        self.created_at = created_at or utcnow()

    def excerpt(self, limit: int = 500) -> str:
        """Начало содержимого для контекста AI"""
        return self.content[:limit]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Source):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Source(id={self.id}, document_id={self.document_id}, type={self.source_type.value})"
