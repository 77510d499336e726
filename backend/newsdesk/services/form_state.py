"""Mutable working copy of a list's editable fields while a form is open."""

from pydantic import BaseModel
from typing import Any, Dict, List, Optional, Union
from newsdesk.schemas.news_list import NewsList as NewsListSchema


class NewsListFormState(BaseModel):
    name: Optional[str] = None
    newspapers: List[int] = []
    filter_authors: List[str] = []
    filter_categories: List[str] = []

    def to_input(self) -> Dict[str, Any]:
        """Plain dict handed to validation on submit."""
        return self.model_dump()


def create_form_state() -> NewsListFormState:
    return NewsListFormState()


def populate_form_state(
    state: NewsListFormState, news_list: Union[NewsListSchema, Dict[str, Any]]
) -> NewsListFormState:
    """Overwrite every field of ``state`` from a fetched list. No validation."""
    if isinstance(news_list, BaseModel):
        news_list = news_list.model_dump()

    state.name = news_list.get("name")
    state.newspapers = list(news_list.get("newspapers") or [])
    state.filter_authors = list(news_list.get("filter_authors") or [])
    state.filter_categories = list(news_list.get("filter_categories") or [])
    return state
