from typing import List
from sqlalchemy.orm import Session
from newsdesk.models.newspaper import Newspaper
from newsdesk.schemas.newspaper import NewspaperRef


def get_newspapers(db: Session) -> List[NewspaperRef]:
    """Return the whole newspaper catalog as {id, name} records, sorted by name."""
    newspapers = (
        db.query(Newspaper.id, Newspaper.name).order_by(Newspaper.name, Newspaper.id).all()
    )
    return [NewspaperRef(id=n.id, name=n.name) for n in newspapers]
