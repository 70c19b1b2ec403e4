from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from documind.domains.assistance.entities import AssistanceType


class AiAssistanceRequest(BaseModel):
    """Запрос помощи AI по документу"""
    document_id: int
    prompt: str = Field(..., min_length=1)
    context: Optional[str] = None  # выделенный текст или позиция курсора
    assistance_type: AssistanceType


class AiAssistanceResponseOut(BaseModel):
    """Схема для ответа с сохраненным обменом"""
    id: int
    document_id: int
    request_prompt: str
    response_content: str
    assistance_type: AssistanceType
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
