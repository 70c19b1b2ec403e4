from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from documind.core.db import get_db
from documind.domains.documents.schemas import (
    DeleteDocumentInput, DocumentCreate, DocumentResponse, DocumentUpdate,
    GetDocumentInput, GetDocumentsInput
)
from documind.domains.documents.services import DocumentService

router = APIRouter(prefix="/rpc", tags=["documents"])


@router.post("/createDocument", response_model=DocumentResponse)
async def create_document(
    document_data: DocumentCreate,
    db: AsyncSession = Depends(get_db)
):
    """Создание нового документа"""
    document_service = DocumentService(db)
    document = await document_service.create_document(document_data)
    return DocumentResponse.model_validate(document)


@router.post("/getDocuments", response_model=List[DocumentResponse])
async def get_documents(
    query: GetDocumentsInput,
    db: AsyncSession = Depends(get_db)
):
    """Получение списка документов пользователя"""
    document_service = DocumentService(db)
    documents = await document_service.get_documents(query)
    return [DocumentResponse.model_validate(doc) for doc in documents]


@router.post("/getDocument", response_model=Optional[DocumentResponse])
async def get_document(
    query: GetDocumentInput,
    db: AsyncSession = Depends(get_db)
):
    """Получение документа; null, если его нет у этого пользователя"""
    document_service = DocumentService(db)
    document = await document_service.get_document(query)
    return DocumentResponse.model_validate(document) if document else None


@router.post("/updateDocument", response_model=Optional[DocumentResponse])
async def update_document(
    update_data: DocumentUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Обновление документа"""
    document_service = DocumentService(db)
    document = await document_service.update_document(update_data)
    return DocumentResponse.model_validate(document) if document else None


@router.post("/deleteDocument", response_model=bool)
async def delete_document(
    query: DeleteDocumentInput,
    db: AsyncSession = Depends(get_db)
):
    """Удаление документа"""
    document_service = DocumentService(db)
    return await document_service.delete_document(query)
