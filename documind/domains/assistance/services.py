import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from documind.core.exceptions import NotFoundError
from documind.db.repositories.assistance_repository import AiAssistanceRepository
from documind.db.repositories.document_repository import DocumentRepository
from documind.db.repositories.source_repository import SourceRepository
from documind.domains.assistance.entities import (
    AiAssistanceResponse, GenerationContext, SourceExcerpt
)
from documind.domains.assistance.generators import ResponseGenerator, TemplateResponseGenerator
from documind.domains.assistance.schemas import AiAssistanceRequest

logger = logging.getLogger(__name__)

SOURCE_EXCERPT_LENGTH = 500


class AiAssistanceService:
    """Сбор контекста, генерация ответа и сохранение обмена"""

    def __init__(self, session: AsyncSession, generator: Optional[ResponseGenerator] = None):
        self.session = session
        self.generator = generator or TemplateResponseGenerator()
        self.document_repository = DocumentRepository(session)
        self.source_repository = SourceRepository(session)
        self.assistance_repository = AiAssistanceRepository(session)

    async def build_context(self, request: AiAssistanceRequest) -> GenerationContext:
        document = await self.document_repository.get_by_id(request.document_id)

        if not document:
            logger.warning(f"AI assistance rejected: document {request.document_id} not found")
            raise NotFoundError("Document", request.document_id)

        sources = await self.source_repository.get_by_document(document.id)

        return GenerationContext(
            assistance_type=request.assistance_type,
            document_title=document.title,
            document_content=document.content,
            word_count=document.get_word_count(),
            selected_context=request.context,
            sources=[
                SourceExcerpt(title=source.title, excerpt=source.excerpt(SOURCE_EXCERPT_LENGTH))
                for source in sources
            ]
        )

    async def request_assistance(self, request: AiAssistanceRequest) -> AiAssistanceResponse:
        """
        Обработка запроса помощи AI.

        Владелец документа не проверяется: запрос не содержит user_id.
        Запись сохраняется только после успешной генерации, поэтому при
        ошибке частичного состояния не остается.
        """
        context = await self.build_context(request)

        try:
            content = await self.generator.generate(request.prompt, context)
        except Exception:
            logger.exception(f"AI generation failed for document {request.document_id}")
            raise

        record = AiAssistanceResponse(
            id=None,
            document_id=request.document_id,
            request_prompt=request.prompt,
            response_content=content,
            assistance_type=request.assistance_type
        )
        saved = await self.assistance_repository.create(record)
        logger.info(f"AI {saved.assistance_type.value} response {saved.id} saved for document {saved.document_id}")
        return saved

    async def get_responses(self, document_id: int) -> List[AiAssistanceResponse]:
        """История ответов по документу, новые первыми"""
        return await self.assistance_repository.get_by_document(document_id)
