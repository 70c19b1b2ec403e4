from documind.db.models.user import User
from documind.db.models.document import Document
from documind.db.models.source import Source
from documind.db.models.assistance import AiAssistanceResponse

__all__ = [
    "User",
    "Document",
    "Source",
    "AiAssistanceResponse",
]
