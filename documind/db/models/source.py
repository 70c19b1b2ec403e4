from sqlalchemy import Column, Enum, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from documind.db.base import BaseModel
from documind.domains.sources.entities import SourceType


class Source(BaseModel):
    __tablename__ = "sources"

    document_id = Column(Integer, ForeignKey("documents.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    source_type = Column(
        Enum(SourceType, name="source_type", values_callable=lambda e: [m.value for m in e], create_constraint=True),
        nullable=False,
    )
    source_url = Column(Text, nullable=True)  # только для source_type = url

    # Relationships
    document = relationship("Document", back_populates="sources")
