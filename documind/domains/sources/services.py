import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from documind.core.exceptions import NotFoundError
from documind.db.repositories.document_repository import DocumentRepository
from documind.db.repositories.source_repository import SourceRepository
from documind.domains.sources.entities import Source
from documind.domains.sources.schemas import DeleteSourceInput, GetSourcesInput, SourceCreate

logger = logging.getLogger(__name__)


class SourceService:
    """Сервис источников документа"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.source_repository = SourceRepository(session)
        self.document_repository = DocumentRepository(session)

    async def create_source(self, source_data: SourceCreate) -> Source:
        if not await self.document_repository.exists(source_data.document_id):
            logger.warning(f"Source create rejected: document {source_data.document_id} not found")
            raise NotFoundError(
                "Document",
                source_data.document_id,
                message=f"Document with id {source_data.document_id} not found"
            )

        source = Source(
            id=None,
            document_id=source_data.document_id,
            title=source_data.title,
            content=source_data.content,
            source_type=source_data.source_type,
            source_url=source_data.source_url
        )
        created = await self.source_repository.create(source)
        logger.info(f"Source {created.id} attached to document {created.document_id}")
        return created

    async def get_sources(self, query: GetSourcesInput) -> List[Source]:
        """Источники документа; неизвестный документ - ошибка, а не пустой список"""
        if not await self.document_repository.exists(query.document_id):
            logger.warning(f"Sources requested for missing document {query.document_id}")
            raise NotFoundError("Document", query.document_id)

        return await self.source_repository.get_by_document(query.document_id)

    async def delete_source(self, query: DeleteSourceInput) -> bool:
        deleted = await self.source_repository.delete_for_document(query.id, query.document_id)
        if deleted:
            logger.info(f"Source {query.id} removed from document {query.document_id}")
        return deleted
