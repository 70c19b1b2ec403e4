from datetime import datetime
from typing import Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator

from documind.domains.sources.entities import SourceType

_url_adapter = TypeAdapter(AnyUrl)


class SourceCreate(BaseModel):
    """Схема для создания источника"""
    document_id: int
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    source_type: SourceType
    source_url: Optional[str] = None

    @field_validator("source_url")
    @classmethod
    def validate_source_url(cls, v):
        if v is None:
            return v
        # проверяем формат, но сохраняем строку в исходном виде
        _url_adapter.validate_python(v)
        return v

    @model_validator(mode="after")
    def check_url_matches_type(self):
        if self.source_type == SourceType.URL and not self.source_url:
            raise ValueError("source_url is required for url sources")
        if self.source_type != SourceType.URL and self.source_url is not None:
            raise ValueError("source_url is only allowed for url sources")
        return self


class GetSourcesInput(BaseModel):
    document_id: int


class DeleteSourceInput(BaseModel):
    """Источник удаляется только в рамках указанного документа"""
    id: int
    document_id: int


class SourceResponse(BaseModel):
    """Схема для ответа с данными источника"""
    id: int
    document_id: int
    title: str
    content: str
    source_type: SourceType
    source_url: Optional[str]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
