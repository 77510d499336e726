from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from newsdesk.core.database import Base


class Newspaper(Base):
    """A newspaper/feed in the catalog. News lists reference these by id."""

    __tablename__ = "newspapers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    url = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    articles = relationship(
        "Article", back_populates="newspaper", cascade="all, delete-orphan"
    )
