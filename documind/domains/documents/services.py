import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from documind.core.exceptions import NotFoundError
from documind.db.repositories.document_repository import DocumentRepository
from documind.db.repositories.user_repository import UserRepository
from documind.domains.documents.entities import Document
from documind.domains.documents.schemas import (
    DeleteDocumentInput, DocumentCreate, DocumentUpdate, GetDocumentInput, GetDocumentsInput
)

logger = logging.getLogger(__name__)


class DocumentService:
    """Сервис для работы с документами"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.document_repository = DocumentRepository(session)
        self.user_repository = UserRepository(session)

    async def create_document(self, document_data: DocumentCreate) -> Document:
        """Создание нового документа для существующего пользователя"""
        if not await self.user_repository.exists(document_data.user_id):
            logger.warning(f"Document create rejected: user {document_data.user_id} not found")
            raise NotFoundError("User", document_data.user_id)

        document = Document.create_document(
            title=document_data.title,
            user_id=document_data.user_id,
            content=document_data.content
        )

        created = await self.document_repository.create(document)
        logger.info(f"Document {created.id} created for user {created.user_id}")
        return created

    async def get_documents(self, query: GetDocumentsInput) -> List[Document]:
        """Документы пользователя постранично; пустой список, если документов нет"""
        return await self.document_repository.get_by_user(query.user_id, query.limit, query.offset)

    async def get_document(self, query: GetDocumentInput) -> Optional[Document]:
        """Документ чужого пользователя неотличим от несуществующего"""
        return await self.document_repository.get_for_user(query.id, query.user_id)

    async def update_document(self, update_data: DocumentUpdate) -> Optional[Document]:
        """
        Частичное обновление документа по id.

        Владелец здесь не проверяется, в отличие от get/delete: запрос
        обновления не содержит user_id.
        """
        document = await self.document_repository.get_by_id(update_data.id)

        if not document:
            return None

        document.apply_update(title=update_data.title, content=update_data.content)
        updated = await self.document_repository.update(document)
        if updated:
            logger.info(f"Document {updated.id} updated")
        return updated

    async def delete_document(self, query: DeleteDocumentInput) -> bool:
        """Удаление документа; False, если документа нет или он чужой"""
        deleted = await self.document_repository.delete_for_user(query.id, query.user_id)
        if deleted:
            logger.info(f"Document {query.id} deleted by user {query.user_id}")
        return deleted
