from typing import List, Optional

from sqlalchemy import and_, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from documind.db.models.document import Document as DocumentModel
from documind.domains.documents.entities import Document


class DocumentRepository:
    """Репозиторий для работы с документами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, document: Document) -> Document:
        """Создание нового документа"""
        db_document = DocumentModel(
            title=document.title,
            content=document.content,
            user_id=document.user_id,
            created_at=document.created_at,
            updated_at=document.updated_at
        )

        self.session.add(db_document)
        await self.session.commit()
        await self.session.refresh(db_document)
        return self._to_domain(db_document)

    async def get_by_id(self, document_id: int) -> Optional[Document]:
        """Получение документа по id без проверки владельца"""
        result = await self.session.execute(
            select(DocumentModel).where(DocumentModel.id == document_id)
        )
        db_document = result.scalar_one_or_none()
        return self._to_domain(db_document) if db_document else None

    async def get_for_user(self, document_id: int, user_id: int) -> Optional[Document]:
        """Получение документа, принадлежащего пользователю"""
        result = await self.session.execute(
            select(DocumentModel).where(
                and_(
                    DocumentModel.id == document_id,
                    DocumentModel.user_id == user_id
                )
            )
        )
        db_document = result.scalar_one_or_none()
        return self._to_domain(db_document) if db_document else None

    async def get_by_user(self, user_id: int, limit: int = 20, offset: int = 0) -> List[Document]:
        """Документы пользователя, последние измененные первыми"""
        result = await self.session.execute(
            select(DocumentModel)
            .where(DocumentModel.user_id == user_id)
            .order_by(DocumentModel.updated_at.desc(), DocumentModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        db_documents = result.scalars().all()
        return [self._to_domain(doc) for doc in db_documents]

    async def exists(self, document_id: int) -> bool:
        result = await self.session.execute(
            select(DocumentModel.id).where(DocumentModel.id == document_id)
        )
        return result.scalar_one_or_none() is not None

    async def update(self, document: Document) -> Optional[Document]:
        """Обновление документа"""
        stmt = (
            update(DocumentModel)
            .where(DocumentModel.id == document.id)
            .values(
                title=document.title,
                content=document.content,
                updated_at=document.updated_at
            )
        )

        result = await self.session.execute(stmt)
        await self.session.commit()

        if result.rowcount == 0:
            return None
        return await self.get_by_id(document.id)

    async def delete_for_user(self, document_id: int, user_id: int) -> bool:
        """Удаление документа владельцем; источники и ответы AI удаляются каскадом"""
        stmt = delete(DocumentModel).where(
            and_(
                DocumentModel.id == document_id,
                DocumentModel.user_id == user_id
            )
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    def _to_domain(self, db_document: DocumentModel) -> Document:
        """Преобразование модели БД в доменную сущность"""
        return Document(
            id=db_document.id,
            title=db_document.title,
            content=db_document.content,
            user_id=db_document.user_id,
            created_at=db_document.created_at,
            updated_at=db_document.updated_at
        )
