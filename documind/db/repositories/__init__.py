from documind.db.repositories.user_repository import UserRepository
from documind.db.repositories.document_repository import DocumentRepository
from documind.db.repositories.source_repository import SourceRepository
from documind.db.repositories.assistance_repository import AiAssistanceRepository

__all__ = [
    "UserRepository",
    "DocumentRepository",
    "SourceRepository",
    "AiAssistanceRepository",
]
