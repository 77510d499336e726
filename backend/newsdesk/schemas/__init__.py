from newsdesk.schemas.news_list import (
    NewsList,
    NewsListCreate,
    NewsListEdit,
    AuthorFilterUpdate,
    CategoryFilterUpdate,
    CreateResult,
    MutationResponse,
    FieldViolation,
    ValidationOutcome,
    validate_news_list,
)
from newsdesk.schemas.newspaper import Newspaper, NewspaperCreate, NewspaperRef
from newsdesk.schemas.notification import Toast
from newsdesk.schemas.selection import (
    AsyncDataState,
    SelectOption,
    SelectionOptionsResponse,
)

__all__ = [
    "NewsList",
    "NewsListCreate",
    "NewsListEdit",
    "AuthorFilterUpdate",
    "CategoryFilterUpdate",
    "CreateResult",
    "MutationResponse",
    "FieldViolation",
    "ValidationOutcome",
    "validate_news_list",
    "Newspaper",
    "NewspaperCreate",
    "NewspaperRef",
    "Toast",
    "AsyncDataState",
    "SelectOption",
    "SelectionOptionsResponse",
]
