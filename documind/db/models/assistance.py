from sqlalchemy import Column, Enum, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from documind.db.base import BaseModel
from documind.domains.assistance.entities import AssistanceType


class AiAssistanceResponse(BaseModel):
    __tablename__ = "ai_assistance_responses"

    document_id = Column(Integer, ForeignKey("documents.id", ondelete="CASCADE"), nullable=False, index=True)
    request_prompt = Column(Text, nullable=False)
    response_content = Column(Text, nullable=False)
    assistance_type = Column(
        Enum(AssistanceType, name="assistance_type", values_callable=lambda e: [m.value for m in e], create_constraint=True),
        nullable=False,
    )

    # Relationships
    document = relationship("Document", back_populates="ai_responses")
