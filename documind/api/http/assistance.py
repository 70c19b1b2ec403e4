from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from documind.api.deps import get_response_generator
from documind.core.db import get_db
from documind.domains.assistance.generators import ResponseGenerator
from documind.domains.assistance.schemas import AiAssistanceRequest, AiAssistanceResponseOut
from documind.domains.assistance.services import AiAssistanceService
from documind.domains.documents.schemas import GetDocumentInput

router = APIRouter(prefix="/rpc", tags=["ai"])


@router.post("/requestAiAssistance", response_model=AiAssistanceResponseOut)
async def request_ai_assistance(
    request: AiAssistanceRequest,
    db: AsyncSession = Depends(get_db),
    generator: ResponseGenerator = Depends(get_response_generator)
):
    """Запрос помощи AI по документу"""
    assistance_service = AiAssistanceService(db, generator)
    response = await assistance_service.request_assistance(request)
    return AiAssistanceResponseOut.model_validate(response)


@router.post("/getAiResponses", response_model=List[AiAssistanceResponseOut])
async def get_ai_responses(
    query: GetDocumentInput,
    db: AsyncSession = Depends(get_db)
):
    """История ответов AI; вход совпадает со схемой доступа к документу"""
    assistance_service = AiAssistanceService(db)
    responses = await assistance_service.get_responses(query.id)
    return [AiAssistanceResponseOut.model_validate(item) for item in responses]
