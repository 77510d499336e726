from pydantic import BaseModel, ValidationError, field_validator
from pydantic_core import PydanticCustomError
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Union
from newsdesk.core import messages
from newsdesk.schemas.notification import Toast


class NewsListBase(BaseModel):
    """Editable shape of a news list, shared by the create and edit schemas."""

    name: str
    newspapers: List[int]
    filter_authors: Optional[List[str]] = None
    filter_categories: Optional[List[str]] = None

    @field_validator("name")
    @classmethod
    def name_min_length(cls, v: str) -> str:
        if len(v) < 3:
            raise PydanticCustomError("name_too_short", messages.NAME_TOO_SHORT)
        return v

    @field_validator("newspapers")
    @classmethod
    def newspapers_not_empty(cls, v: List[int]) -> List[int]:
        if len(v) < 1:
            raise PydanticCustomError("newspapers_empty", messages.NEWSPAPERS_EMPTY)
        return v


class NewsListCreate(NewsListBase):
    pass


class NewsListEdit(NewsListBase):
    pass


class AuthorFilterUpdate(BaseModel):
    authors: List[str]


class CategoryFilterUpdate(BaseModel):
    categories: List[str]


class NewsList(BaseModel):
    """A stored news list as returned by the query layer."""

    id: str
    name: str
    newspapers: List[int]
    author: int
    filter_authors: Optional[List[str]] = None
    filter_categories: Optional[List[str]] = None

    class Config:
        from_attributes = True


class NewsListDetail(NewsList):
    created_at: Optional[datetime] = None


class FieldViolation(BaseModel):
    field: str
    message: str


class ValidationOutcome(BaseModel):
    """Either a normalized value or the field-level violations, never both."""

    value: Optional[NewsListBase] = None
    violations: List[FieldViolation] = []

    @property
    def ok(self) -> bool:
        return not self.violations


class CreateResult(BaseModel):
    success: bool
    list_id: Optional[str] = None


SCHEMAS = {
    "create": NewsListCreate,
    "edit": NewsListEdit,
}


def _violation_message(error: Dict[str, Any]) -> str:
    if error["type"] == "missing":
        return messages.FIELD_REQUIRED
    return error["msg"]


def validate_news_list(
    candidate: Union[Dict[str, Any], BaseModel],
    schema: Literal["create", "edit"] = "create",
) -> ValidationOutcome:
    """
    Validate a candidate object against the named schema.

    Args:
        candidate: Mapping (e.g. submitted form data) or model to validate
        schema: "create" or "edit"

    Returns:
        ValidationOutcome with the normalized value or the per-field violations
    """
    model = SCHEMAS[schema]
    if isinstance(candidate, BaseModel):
        candidate = candidate.model_dump()

    try:
        value = model.model_validate(candidate)
    except ValidationError as e:
        violations = [
            FieldViolation(
                field=".".join(str(part) for part in error["loc"]) or "__root__",
                message=_violation_message(error),
            )
            for error in e.errors()
        ]
        return ValidationOutcome(violations=violations)

    return ValidationOutcome(value=value)


class MutationResponse(BaseModel):
    """Body of every news list mutation: outcome, toasts and where the UI goes next."""

    success: bool
    list_id: Optional[str] = None
    notifications: List[Toast] = []
    redirect_to: Optional[str] = None
