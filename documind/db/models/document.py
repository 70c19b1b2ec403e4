from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from documind.core.clock import utcnow
from documind.db.base import BaseModel


class Document(BaseModel):
    __tablename__ = "documents"

    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False, default="")
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    updated_at = Column(DateTime, nullable=False, default=utcnow)

    # Relationships
    user = relationship("User", back_populates="documents")
    sources = relationship("Source", back_populates="document", cascade="all, delete-orphan", passive_deletes=True)
    ai_responses = relationship(
        "AiAssistanceResponse", back_populates="document", cascade="all, delete-orphan", passive_deletes=True
    )
