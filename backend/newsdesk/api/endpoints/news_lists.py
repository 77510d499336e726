from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from newsdesk.core.database import get_db, get_session_factory
from newsdesk.core.errors import violations_response
from newsdesk.core.auth import get_current_user, get_current_user_optional
from newsdesk.models.user import User
from newsdesk.schemas.news_list import (
    AuthorFilterUpdate,
    CategoryFilterUpdate,
    MutationResponse,
    NewsList as NewsListSchema,
    validate_news_list,
)
from newsdesk.schemas.selection import SelectionOptionsResponse
from newsdesk.services.form_state import (
    NewsListFormState,
    create_form_state,
    populate_form_state,
)
from newsdesk.services.navigation import (
    news_list_edit_path,
    news_list_index_path,
    validate_news_list_id,
)
from newsdesk.services.news_list_service import NewsListService
from newsdesk.services.notifier import Notifier
from newsdesk.services.selection_options import SelectionOptions

router = APIRouter()


@router.get("/", response_model=List[NewsListSchema])
def get_news_lists(db: Session = Depends(get_db)):
    """Get all news lists regardless of owner, newest first."""
    return NewsListService(db, Notifier()).get_news_lists()


@router.get("/mine", response_model=List[NewsListSchema])
def get_my_news_lists(
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user_optional),
):
    """Get the current user's news lists. Empty when not signed in."""
    return NewsListService(db, Notifier(), current_user).get_my_news_lists()


@router.get("/options", response_model=SelectionOptionsResponse)
async def get_selection_options(session_factory=Depends(get_session_factory)):
    """Authors, categories and newspapers for the list form's selection controls."""
    options = await SelectionOptions(session_factory).load_all()
    return SelectionOptionsResponse(
        authors=options.authors.state(),
        categories=options.categories.state(),
        newspapers=options.newspapers.state(),
    )


@router.get("/new/form", response_model=NewsListFormState)
def get_empty_form():
    """Starting point for a new list."""
    return create_form_state()


@router.get("/{list_id}", response_model=NewsListSchema)
def get_news_list(list_id: str, db: Session = Depends(get_db)):
    """Get a single news list. Answers 404 when it does not exist."""
    list_id = validate_news_list_id(list_id)
    return NewsListService(db, Notifier()).get_news_list(list_id)


@router.get("/{list_id}/form", response_model=NewsListFormState)
def get_news_list_form(list_id: str, db: Session = Depends(get_db)):
    """Form state populated from a stored list."""
    list_id = validate_news_list_id(list_id)
    news_list = NewsListService(db, Notifier()).get_news_list(list_id)
    return populate_form_state(create_form_state(), news_list)


@router.post("/", response_model=MutationResponse)
def create_news_list(
    list_data: dict,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Create a news list owned by the current user.

    Field violations answer 422 before anything is written. On success the
    response points the UI at the new list's edit view.
    """
    outcome = validate_news_list(list_data, schema="create")
    if not outcome.ok:
        return violations_response(outcome)

    notifier = Notifier()
    result = NewsListService(db, notifier, current_user).create_news_list(
        outcome.value
    )
    return MutationResponse(
        success=result.success,
        list_id=result.list_id,
        notifications=notifier.drain(),
        redirect_to=news_list_edit_path(result.list_id) if result.success else None,
    )


@router.put("/{list_id}", response_model=MutationResponse)
def update_news_list(
    list_id: str,
    list_data: dict,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Replace the editable fields of a news list."""
    list_id = validate_news_list_id(list_id)
    outcome = validate_news_list(list_data, schema="edit")
    if not outcome.ok:
        return violations_response(outcome)

    notifier = Notifier()
    success = NewsListService(db, notifier, current_user).update_news_list(
        list_id, outcome.value
    )
    return MutationResponse(
        success=success,
        list_id=list_id,
        notifications=notifier.drain(),
        redirect_to=news_list_index_path() if success else None,
    )


@router.put("/{list_id}/filters/authors", response_model=MutationResponse)
def edit_author_filter(
    list_id: str,
    payload: AuthorFilterUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Update only the author filter of a news list."""
    list_id = validate_news_list_id(list_id)
    notifier = Notifier()
    success = NewsListService(db, notifier, current_user).edit_author_filter(
        list_id, payload.authors
    )
    return MutationResponse(
        success=success, list_id=list_id, notifications=notifier.drain()
    )


@router.put("/{list_id}/filters/categories", response_model=MutationResponse)
def edit_category_filter(
    list_id: str,
    payload: CategoryFilterUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Update only the category filter of a news list."""
    list_id = validate_news_list_id(list_id)
    notifier = Notifier()
    success = NewsListService(db, notifier, current_user).edit_category_filter(
        list_id, payload.categories
    )
    return MutationResponse(
        success=success, list_id=list_id, notifications=notifier.drain()
    )
