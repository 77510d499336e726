"""
Domain errors raised by the news list layer.

Each error carries the HTTP status the calling view should answer with and a
user-facing (German) message. The app registers ``newsdesk_error_handler`` so
routers can let these propagate.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from typing import Optional
from newsdesk.core import messages
from newsdesk.schemas.news_list import ValidationOutcome


class NewsdeskError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500
    message = messages.GENERIC_ERROR

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class NewsListNotFoundError(NewsdeskError):
    status_code = 404
    message = messages.LIST_NOT_FOUND

    def __init__(self, list_id: Optional[str] = None, message: Optional[str] = None):
        self.list_id = list_id
        super().__init__(message)


class MissingListIdError(NewsdeskError):
    status_code = 404
    message = messages.LIST_ID_MISSING


async def newsdesk_error_handler(request: Request, exc: NewsdeskError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"statusCode": exc.status_code, "detail": exc.message},
    )


def violations_response(outcome: ValidationOutcome) -> JSONResponse:
    """422 listing every rejected field with its message."""
    return JSONResponse(
        status_code=422,
        content={"detail": [v.model_dump() for v in outcome.violations]},
    )
