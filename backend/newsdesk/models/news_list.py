import uuid
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from datetime import datetime
from newsdesk.core.database import Base


def _new_list_id() -> str:
    return str(uuid.uuid4())


class NewsList(Base):
    __tablename__ = "newspaper_list"

    id = Column(String(36), primary_key=True, default=_new_list_id)
    name = Column(String, nullable=False)
    # Ordered newspaper ids, e.g. [3, 1, 7]
    newspapers = Column(JSON, nullable=False, default=list)
    author = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Empty or NULL means "no filter"
    filter_authors = Column(JSON, nullable=True, default=list)
    filter_categories = Column(JSON, nullable=True, default=list)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    # Relationships
    owner = relationship("User", back_populates="news_lists")
