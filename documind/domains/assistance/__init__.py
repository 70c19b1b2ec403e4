from documind.domains.assistance.entities import (
    AiAssistanceResponse, AssistanceType, GenerationContext, SourceExcerpt
)
from documind.domains.assistance.schemas import AiAssistanceRequest, AiAssistanceResponseOut

__all__ = [
    "AiAssistanceResponse", "AssistanceType", "GenerationContext", "SourceExcerpt",
    "AiAssistanceRequest", "AiAssistanceResponseOut",
]
