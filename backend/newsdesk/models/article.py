from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from newsdesk.core.database import Base


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True, index=True)
    newspaper_id = Column(
        Integer, ForeignKey("newspapers.id"), nullable=False, index=True
    )

    title = Column(String, nullable=False)
    link = Column(String, unique=True, nullable=False, index=True)
    # Filter values for news lists are drawn from these two columns
    author = Column(String, nullable=True, index=True)
    category = Column(String, nullable=True, index=True)
    published_date = Column(DateTime)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    # Relationships
    newspaper = relationship("Newspaper", back_populates="articles")
