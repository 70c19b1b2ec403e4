from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DocumentCreate(BaseModel):
    """Схема для создания документа"""
    title: str = Field(..., min_length=1)
    content: str = ""
    user_id: int


class DocumentUpdate(BaseModel):
    """Схема для обновления документа: отсутствующие поля не меняются"""
    id: int
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = None


class GetDocumentsInput(BaseModel):
    """Постраничный список документов пользователя"""
    user_id: int
    limit: int = Field(20, ge=1, le=100)
    offset: int = Field(0, ge=0)


class GetDocumentInput(BaseModel):
    """Доступ к документу: id документа и id владельца"""
    id: int
    user_id: int


class DeleteDocumentInput(GetDocumentInput):
    pass


class DocumentResponse(BaseModel):
    """Схема для ответа с данными документа"""
    id: int
    title: str
    content: str
    user_id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
