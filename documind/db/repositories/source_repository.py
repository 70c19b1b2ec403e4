from typing import List

from sqlalchemy import and_, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from documind.db.models.source import Source as SourceModel
from documind.domains.sources.entities import Source


class SourceRepository:
    """Репозиторий для работы с источниками документа"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, source: Source) -> Source:
        db_source = SourceModel(
            document_id=source.document_id,
            title=source.title,
            content=source.content,
            source_type=source.source_type,
            source_url=source.source_url,
            created_at=source.created_at
        )

        self.session.add(db_source)
        await self.session.commit()
        await self.session.refresh(db_source)
        return self._to_domain(db_source)

    async def get_by_document(self, document_id: int) -> List[Source]:
        """Источники документа в порядке добавления"""
        result = await self.session.execute(
            select(SourceModel)
            .where(SourceModel.document_id == document_id)
            .order_by(SourceModel.id)
        )
        return [self._to_domain(source) for source in result.scalars().all()]

    async def delete_for_document(self, source_id: int, document_id: int) -> bool:
        stmt = delete(SourceModel).where(
            and_(
                SourceModel.id == source_id,
                SourceModel.document_id == document_id
            )
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    def _to_domain(self, db_source: SourceModel) -> Source:
        return Source(
            id=db_source.id,
            document_id=db_source.document_id,
            title=db_source.title,
            content=db_source.content,
            source_type=db_source.source_type,
            source_url=db_source.source_url,
            created_at=db_source.created_at
        )
