"""
Data access for news lists.

Reads and writes go through the injected session. Single-record reads raise
``NewsListNotFoundError``; bulk reads degrade to an empty list. Mutations never
raise: they report through the notifier and return a success flag.
"""

import logging
from typing import Any, Dict, List, Optional, Union
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from newsdesk.core import messages
from newsdesk.core.errors import NewsListNotFoundError
from newsdesk.core.logging_config import log_audit_event
from newsdesk.models.news_list import NewsList
from newsdesk.models.user import User
from newsdesk.schemas.news_list import (
    CreateResult,
    NewsList as NewsListSchema,
    NewsListCreate,
    NewsListEdit,
    validate_news_list,
)
from newsdesk.services.notifier import Notifier

logger = logging.getLogger(__name__)

ListInput = Union[Dict[str, Any], NewsListCreate, NewsListEdit]


def backend_error_message(error: Exception) -> str:
    """Raw error text from the database driver, without SQLAlchemy's statement dump."""
    original = getattr(error, "orig", None)
    return str(original if original is not None else error)


class NewsListService:
    def __init__(
        self,
        db: Session,
        notifier: Notifier,
        current_user: Optional[User] = None,
    ):
        self.db = db
        self.notifier = notifier
        self.current_user = current_user

    @property
    def user_id(self) -> Optional[int]:
        return self.current_user.id if self.current_user is not None else None

    # --- Reads ---

    def get_news_list(self, list_id: str) -> NewsListSchema:
        """Fetch one list. Raises NewsListNotFoundError on zero rows or a query error."""
        try:
            news_list = self.db.query(NewsList).filter(NewsList.id == list_id).first()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching news list {list_id}: {e}")
            self.db.rollback()
            raise NewsListNotFoundError(list_id) from e

        if news_list is None:
            raise NewsListNotFoundError(list_id)

        return NewsListSchema.model_validate(news_list)

    def get_my_news_lists(self) -> List[NewsListSchema]:
        """Lists owned by the current user, newest first. Empty without a user."""
        if self.user_id is None:
            return []

        try:
            news_lists = (
                self.db.query(NewsList)
                .filter(NewsList.author == self.user_id)
                .order_by(NewsList.created_at.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.warning(f"Error fetching news lists for user {self.user_id}: {e}")
            self.db.rollback()
            return []

        return [NewsListSchema.model_validate(n) for n in news_lists]

    def get_news_lists(self) -> List[NewsListSchema]:
        """All lists regardless of owner, newest first."""
        try:
            news_lists = (
                self.db.query(NewsList).order_by(NewsList.created_at.desc()).all()
            )
        except SQLAlchemyError as e:
            logger.warning(f"Error fetching news lists: {e}")
            self.db.rollback()
            return []

        return [NewsListSchema.model_validate(n) for n in news_lists]

    # --- Mutations ---

    def create_news_list(self, list_data: ListInput) -> CreateResult:
        """Validate and insert a list owned by the current user."""
        outcome = validate_news_list(list_data, schema="create")
        if not outcome.ok:
            self.notifier.error(
                "; ".join(v.message for v in outcome.violations)
            )
            return CreateResult(success=False)

        if self.user_id is None:
            self.notifier.error(messages.NOT_AUTHENTICATED)
            return CreateResult(success=False)

        try:
            # Absent filters fall back to the column default (empty list)
            news_list = NewsList(
                **outcome.value.model_dump(exclude_none=True), author=self.user_id
            )
            self.db.add(news_list)
            self.db.commit()
            self.db.refresh(news_list)
        except SQLAlchemyError as e:
            self.db.rollback()
            message = backend_error_message(e)
            logger.error(f"Error creating news list: {message}")
            log_audit_event(
                event_type="news_list.create.failure",
                message=f"Creating news list failed: {message}",
                level=logging.WARNING,
                user_id=self.user_id,
            )
            self.notifier.error(message)
            return CreateResult(success=False)

        log_audit_event(
            event_type="news_list.create.success",
            message=f"News list '{news_list.name}' created",
            user_id=self.user_id,
            list_id=news_list.id,
        )
        self.notifier.success(messages.TOAST_LIST_CREATED)
        return CreateResult(success=True, list_id=news_list.id)

    def update_news_list(self, list_id: str, list_data: ListInput) -> bool:
        """Replace the editable columns of a list."""
        outcome = validate_news_list(list_data, schema="edit")
        if not outcome.ok:
            self.notifier.error(
                "; ".join(v.message for v in outcome.violations)
            )
            return False

        return self._update_columns(
            list_id,
            outcome.value.model_dump(exclude_none=True),
            event_type="news_list.update",
            success_title=messages.TOAST_LIST_SAVED,
        )

    def edit_author_filter(self, list_id: str, authors: List[str]) -> bool:
        """Update only the author filter of a list."""
        return self._update_columns(
            list_id,
            {"filter_authors": list(authors)},
            event_type="news_list.filter_authors",
            success_title=messages.TOAST_AUTHOR_FILTER_SAVED,
            failure_template=messages.AUTHOR_FILTER_FAILED,
            failure_icon=messages.ICON_FAILURE,
        )

    def edit_category_filter(self, list_id: str, categories: List[str]) -> bool:
        """Update only the category filter of a list."""
        return self._update_columns(
            list_id,
            {"filter_categories": list(categories)},
            event_type="news_list.filter_categories",
            success_title=messages.TOAST_CATEGORY_FILTER_SAVED,
            failure_template=messages.CATEGORY_FILTER_FAILED,
            failure_icon=messages.ICON_FAILURE,
        )

    def _update_columns(
        self,
        list_id: str,
        values: Dict[str, Any],
        event_type: str,
        success_title: str,
        failure_template: str = "{error}",
        failure_icon: Optional[str] = None,
    ) -> bool:
        if self.user_id is None:
            self.notifier.error(
                failure_template.format(error=messages.NOT_AUTHENTICATED),
                icon=failure_icon,
            )
            return False

        try:
            updated = (
                self.db.query(NewsList)
                .filter(NewsList.id == list_id, NewsList.author == self.user_id)
                .update(values, synchronize_session=False)
            )
            if updated == 0:
                raise NewsListNotFoundError(list_id)
            self.db.commit()
        except (SQLAlchemyError, NewsListNotFoundError) as e:
            self.db.rollback()
            message = backend_error_message(e)
            logger.error(f"Error updating news list {list_id}: {message}")
            log_audit_event(
                event_type=f"{event_type}.failure",
                message=f"Updating news list failed: {message}",
                level=logging.WARNING,
                user_id=self.user_id,
                list_id=list_id,
                columns=sorted(values),
            )
            self.notifier.error(
                failure_template.format(error=message), icon=failure_icon
            )
            return False

        log_audit_event(
            event_type=f"{event_type}.success",
            message=f"News list {list_id} updated",
            user_id=self.user_id,
            list_id=list_id,
            columns=sorted(values),
        )
        self.notifier.success(success_title)
        return True
