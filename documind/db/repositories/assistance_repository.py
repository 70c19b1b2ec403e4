from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from documind.db.models.assistance import AiAssistanceResponse as AiAssistanceResponseModel
from documind.domains.assistance.entities import AiAssistanceResponse


class AiAssistanceRepository:
    """Репозиторий журнала запросов к AI; записи только добавляются"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, response: AiAssistanceResponse) -> AiAssistanceResponse:
        db_response = AiAssistanceResponseModel(
            document_id=response.document_id,
            request_prompt=response.request_prompt,
            response_content=response.response_content,
            assistance_type=response.assistance_type,
            created_at=response.created_at
        )

        self.session.add(db_response)
        await self.session.commit()
        await self.session.refresh(db_response)
        return self._to_domain(db_response)

    async def get_by_document(self, document_id: int) -> List[AiAssistanceResponse]:
        """Ответы по документу, новые первыми"""
        result = await self.session.execute(
            select(AiAssistanceResponseModel)
            .where(AiAssistanceResponseModel.document_id == document_id)
            .order_by(AiAssistanceResponseModel.created_at.desc(), AiAssistanceResponseModel.id.desc())
        )
        return [self._to_domain(row) for row in result.scalars().all()]

    def _to_domain(self, db_response: AiAssistanceResponseModel) -> AiAssistanceResponse:
        return AiAssistanceResponse(
            id=db_response.id,
            document_id=db_response.document_id,
            request_prompt=db_response.request_prompt,
            response_content=db_response.response_content,
            assistance_type=db_response.assistance_type,
            created_at=db_response.created_at
        )
