import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from documind.core.clock import utcnow


class AssistanceType(str, enum.Enum):
    WRITE = "write"
    EDIT = "edit"
    STUDY_GUIDE = "study_guide"
    SUMMARIZE = "summarize"


@dataclass
class AiAssistanceResponse:
    """Неизменяемая запись одного обмена запрос/ответ"""
    id: Optional[int]
    document_id: int
    request_prompt: str
    response_content: str
    assistance_type: AssistanceType
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class SourceExcerpt:
    title: str
    excerpt: str


@dataclass
class GenerationContext:
    """Все, что генератор знает о документе в момент запроса"""
    assistance_type: AssistanceType
    document_title: str
    document_content: str
    word_count: int
    selected_context: Optional[str] = None
    sources: List[SourceExcerpt] = field(default_factory=list)

    def render(self) -> str:
        """Текстовый блок контекста: документ, выделение, источники"""
        text = f"Document Title: {self.document_title}\n"
        text += f"Document Content: {self.document_content}\n"

        if self.selected_context:
            text += f"Selected Context: {self.selected_context}\n"

        if self.sources:
            text += "\nAvailable Sources:\n"
            for source in self.sources:
                text += f"- {source.title}: {source.excerpt}...\n"

        return text
