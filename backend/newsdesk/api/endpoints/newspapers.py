from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from newsdesk.core.database import get_db
from newsdesk.core.auth import get_current_user
from newsdesk.models.newspaper import Newspaper
from newsdesk.models.user import User
from newsdesk.schemas.newspaper import (
    Newspaper as NewspaperSchema,
    NewspaperCreate,
    NewspaperRef,
)
from newsdesk.services.newspaper_catalog import get_newspapers

router = APIRouter()


@router.get("/", response_model=List[NewspaperRef])
def list_newspapers(db: Session = Depends(get_db)):
    """The newspaper catalog as {id, name} records."""
    return get_newspapers(db)


@router.get("/{newspaper_id}", response_model=NewspaperSchema)
def get_newspaper(newspaper_id: int, db: Session = Depends(get_db)):
    """Get a single newspaper."""
    newspaper = db.query(Newspaper).filter(Newspaper.id == newspaper_id).first()
    if not newspaper:
        raise HTTPException(status_code=404, detail="Newspaper not found")
    return newspaper


@router.post("/", response_model=NewspaperSchema)
def create_newspaper(
    newspaper: NewspaperCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Add a newspaper to the catalog."""
    existing = db.query(Newspaper).filter(Newspaper.name == newspaper.name).first()
    if existing:
        raise HTTPException(status_code=400, detail="Newspaper already exists")

    db_newspaper = Newspaper(**newspaper.model_dump())
    db.add(db_newspaper)
    db.commit()
    db.refresh(db_newspaper)
    return db_newspaper
