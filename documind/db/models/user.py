from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship

from documind.db.base import BaseModel


class User(BaseModel):
    __tablename__ = "users"

    email = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(Text, nullable=False)

    # Relationships
    documents = relationship("Document", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
