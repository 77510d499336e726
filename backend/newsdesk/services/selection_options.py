"""
Read-only sources for the list form's selection controls.

Each source loads once per ``SelectionOptions`` instance and exposes a pending
flag while it does. Query errors resolve to an empty list.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Generic, List, Optional, TypeVar
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from newsdesk.models.article import Article
from newsdesk.schemas.selection import SelectOption
from newsdesk.services.newspaper_catalog import get_newspapers

logger = logging.getLogger(__name__)

T = TypeVar("T")


def distinct_authors(db: Session) -> List[str]:
    """Distinct, non-empty article author names in alphabetical order."""
    rows = (
        db.query(Article.author)
        .filter(Article.author.isnot(None), Article.author != "")
        .distinct()
        .order_by(Article.author)
        .all()
    )
    return [row.author for row in rows]


def distinct_categories(db: Session) -> List[str]:
    """Distinct, non-empty article category names in alphabetical order."""
    rows = (
        db.query(Article.category)
        .filter(Article.category.isnot(None), Article.category != "")
        .distinct()
        .order_by(Article.category)
        .all()
    )
    return [row.category for row in rows]


class AsyncData(Generic[T]):
    """A keyed value that is fetched once; ``pending`` is True until it settles."""

    def __init__(self, key: str, loader: Callable[[], Awaitable[List[T]]]):
        self.key = key
        self._loader = loader
        self.data: Optional[List[T]] = None
        self.pending = True
        self._lock = asyncio.Lock()

    async def load(self) -> List[T]:
        async with self._lock:
            if not self.pending:
                return self.data
            try:
                self.data = await self._loader()
            except SQLAlchemyError as e:
                logger.warning(f"Loading selection source '{self.key}' failed: {e}")
                self.data = []
            self.pending = False
            return self.data

    def state(self) -> Dict[str, Any]:
        return {"data": self.data or [], "pending": self.pending}


class SelectionOptions:
    """The form's three selection sources.

    Each source runs its query in a worker thread on a session of its own, so
    ``load_all`` overlaps them without blocking the event loop.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory
        self.authors: AsyncData[str] = AsyncData(
            "all-distinct-authors", self._load_authors
        )
        self.categories: AsyncData[str] = AsyncData(
            "all-distinct-categories", self._load_categories
        )
        self.newspapers: AsyncData[SelectOption] = AsyncData(
            "all-newspapers-for-select", self._load_newspapers
        )

    def _query(self, fetch: Callable[[Session], List[Any]]) -> List[Any]:
        db = self.session_factory()
        try:
            return fetch(db)
        finally:
            db.close()

    async def _run(self, fetch: Callable[[Session], List[Any]]) -> List[Any]:
        return await asyncio.to_thread(self._query, fetch)

    async def _load_authors(self) -> List[str]:
        return await self._run(distinct_authors)

    async def _load_categories(self) -> List[str]:
        return await self._run(distinct_categories)

    async def _load_newspapers(self) -> List[SelectOption]:
        newspapers = await self._run(get_newspapers)
        return [SelectOption(label=n.name, value=n.id) for n in newspapers]

    async def load_all(self) -> "SelectionOptions":
        """Load every source concurrently."""
        await asyncio.gather(
            self.authors.load(), self.categories.load(), self.newspapers.load()
        )
        return self
