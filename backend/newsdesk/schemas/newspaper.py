from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class NewspaperBase(BaseModel):
    name: str
    url: Optional[str] = None


class NewspaperCreate(NewspaperBase):
    pass


class Newspaper(NewspaperBase):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class NewspaperRef(BaseModel):
    """The {id, name} record the newspaper catalog accessor returns."""

    id: int
    name: str

    class Config:
        from_attributes = True
