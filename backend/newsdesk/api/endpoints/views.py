"""
Page routes for the list management UI.

GETs return the view model a page renders. POSTs run the mutation and answer
with a 303 redirect; the toasts travel to the next page in a flash cookie.
Rejected input answers 422 with one entry per field.
"""

import asyncio
import json
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, Response
from sqlalchemy.orm import Session
from typing import List, Optional
from newsdesk.core.database import get_db, get_session_factory
from newsdesk.core.errors import violations_response
from newsdesk.core.auth import get_current_user, get_current_user_optional
from newsdesk.models.user import User
from newsdesk.schemas.news_list import validate_news_list
from newsdesk.schemas.notification import Toast
from newsdesk.schemas.selection import SelectionOptionsResponse
from newsdesk.services.form_state import create_form_state, populate_form_state
from newsdesk.services.navigation import (
    navigate_to_news_list,
    navigate_to_news_list_edit,
    route_param,
    validate_news_list_id,
)
from newsdesk.services.news_list_service import NewsListService
from newsdesk.services.notifier import Notifier
from newsdesk.services.selection_options import SelectionOptions

FLASH_COOKIE_NAME = "flash"

router = APIRouter()


def _set_flash(response: Response, toasts: List[Toast]) -> Response:
    response.set_cookie(
        key=FLASH_COOKIE_NAME,
        value=json.dumps([t.model_dump() for t in toasts]),
        httponly=True,
        max_age=60,
    )
    return response


def _read_flash(request: Request) -> List[dict]:
    raw = request.cookies.get(FLASH_COOKIE_NAME)
    if not raw:
        return []
    try:
        return json.loads(raw)
    except ValueError:
        return []


def _page(request: Request, content: dict) -> JSONResponse:
    """View model response carrying (and consuming) any flashed toasts."""
    content["notifications"] = _read_flash(request)
    response = JSONResponse(content=content)
    if FLASH_COOKIE_NAME in request.cookies:
        response.delete_cookie(FLASH_COOKIE_NAME)
    return response


async def _options(session_factory) -> dict:
    options = await SelectionOptions(session_factory).load_all()
    return SelectionOptionsResponse(
        authors=options.authors.state(),
        categories=options.categories.state(),
        newspapers=options.newspapers.state(),
    ).model_dump()


@router.get("")
def news_list_index(
    request: Request,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user_optional),
):
    """The signed-in user's lists."""
    lists = NewsListService(db, Notifier(), current_user).get_my_news_lists()
    return _page(request, {"lists": [n.model_dump() for n in lists]})


@router.get("/new")
async def new_news_list(
    request: Request, session_factory=Depends(get_session_factory)
):
    """Empty form plus the selection options."""
    return _page(
        request,
        {
            "form": create_form_state().model_dump(),
            "options": await _options(session_factory),
        },
    )


@router.get("/edit")
def edit_news_list_by_query(id: List[str] = Query(default=[])):
    """Legacy link form ``/rss-feeds/edit?id=...``; forwards to the canonical path."""
    list_id = validate_news_list_id(route_param(id))
    return navigate_to_news_list_edit(list_id)


@router.get("/{list_id}")
async def edit_news_list(
    list_id: str,
    request: Request,
    db: Session = Depends(get_db),
    session_factory=Depends(get_session_factory),
):
    """A stored list, its populated form and the selection options."""
    list_id = validate_news_list_id(route_param(list_id))
    news_list = await asyncio.to_thread(
        NewsListService(db, Notifier()).get_news_list, list_id
    )
    return _page(
        request,
        {
            "list": news_list.model_dump(),
            "form": populate_form_state(create_form_state(), news_list).model_dump(),
            "options": await _options(session_factory),
        },
    )


@router.post("")
def submit_new_news_list(
    list_data: dict,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create a list, then go to its edit page."""
    outcome = validate_news_list(list_data, schema="create")
    if not outcome.ok:
        return violations_response(outcome)

    notifier = Notifier()
    result = NewsListService(db, notifier, current_user).create_news_list(
        outcome.value
    )
    if not result.success:
        return JSONResponse(
            status_code=400,
            content={"notifications": [t.model_dump() for t in notifier.drain()]},
        )
    return _set_flash(navigate_to_news_list_edit(result.list_id), notifier.drain())


@router.post("/{list_id}")
def submit_news_list(
    list_id: str,
    list_data: dict,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Save a list, then go back to the overview."""
    list_id = validate_news_list_id(route_param(list_id))
    outcome = validate_news_list(list_data, schema="edit")
    if not outcome.ok:
        return violations_response(outcome)

    notifier = Notifier()
    success = NewsListService(db, notifier, current_user).update_news_list(
        list_id, outcome.value
    )
    if not success:
        return JSONResponse(
            status_code=400,
            content={"notifications": [t.model_dump() for t in notifier.drain()]},
        )
    return _set_flash(navigate_to_news_list(), notifier.drain())
