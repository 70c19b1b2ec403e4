from documind.domains.documents.entities import Document, UNTITLED_TITLE
from documind.domains.documents.schemas import (
    DocumentCreate, DocumentUpdate, GetDocumentsInput, GetDocumentInput,
    DeleteDocumentInput, DocumentResponse
)

__all__ = [
    "Document", "UNTITLED_TITLE",
    "DocumentCreate", "DocumentUpdate", "GetDocumentsInput", "GetDocumentInput",
    "DeleteDocumentInput", "DocumentResponse",
]
