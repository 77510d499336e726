"""
Route parameter normalization and post-mutation redirects for the list views.

The router may hand over a path segment or a repeated query parameter. The
boundary wraps either in a ``RouteParam`` so the helpers below never guess.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union
from fastapi import status
from fastapi.responses import RedirectResponse
from newsdesk.core.config import settings
from newsdesk.core.errors import MissingListIdError


@dataclass(frozen=True)
class SingleRouteParam:
    value: Optional[str]

    def first(self) -> Optional[str]:
        return self.value


@dataclass(frozen=True)
class MultiRouteParam:
    values: Tuple[str, ...]

    def first(self) -> Optional[str]:
        return self.values[0] if self.values else None


RouteParam = Union[SingleRouteParam, MultiRouteParam]


def route_param(raw: Union[None, str, Sequence[str], RouteParam]) -> RouteParam:
    """Wrap a raw router value in the matching variant."""
    if isinstance(raw, (SingleRouteParam, MultiRouteParam)):
        return raw
    if raw is None or isinstance(raw, str):
        return SingleRouteParam(raw)
    return MultiRouteParam(tuple(raw))


def validate_news_list_id(param: Union[RouteParam, str, Sequence[str], None]) -> str:
    """Return the list id carried by a route parameter or raise MissingListIdError."""
    list_id = route_param(param).first()
    if not list_id:
        raise MissingListIdError()
    return list_id


def news_list_index_path() -> str:
    return settings.NEWS_LIST_BASE_PATH


def news_list_edit_path(list_id: str) -> str:
    return f"{settings.NEWS_LIST_BASE_PATH}/{list_id}"


def navigate_to_news_list_edit(list_id: str) -> RedirectResponse:
    return RedirectResponse(
        news_list_edit_path(list_id), status_code=status.HTTP_303_SEE_OTHER
    )


def navigate_to_news_list() -> RedirectResponse:
    return RedirectResponse(
        news_list_index_path(), status_code=status.HTTP_303_SEE_OTHER
    )
