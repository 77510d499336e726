from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from newsdesk.core.database import get_db
from newsdesk.core.config import settings
from newsdesk.core.auth import (
    AUTH_COOKIE_NAME,
    create_access_token,
    decode_token,
    get_current_user,
)
from newsdesk.models.user import User
from newsdesk.schemas.user import DevLoginRequest, TokenResponse, User as UserSchema
from datetime import datetime
import logging
from slowapi import Limiter
from slowapi.util import get_remote_address
from newsdesk.core.logging_config import log_audit_event

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.post("/dev-login", response_model=TokenResponse)
@limiter.limit("10/minute")
async def dev_login(
    request: Request, login: DevLoginRequest, db: Session = Depends(get_db)
):
    """
    Development sign-in: find or create a user by email and issue a token.

    Only available with DEV_MODE enabled. The token is returned in the body
    and set as an HttpOnly cookie.
    """
    if not settings.DEV_MODE:
        raise HTTPException(
            status_code=403, detail="Development login is disabled"
        )

    logger.warning("Using insecure development authentication")

    user = db.query(User).filter(User.email == login.email).first()
    if not user:
        user = User(
            sub=f"dev-{login.email}",
            email=login.email,
            name=login.name or login.email.split("@")[0],
            is_active=True,
        )
        db.add(user)
        log_audit_event(
            event_type="auth.user.created",
            message="Development user account created",
            event_category="authentication",
            username=login.email,
        )
    user.last_login = datetime.utcnow()
    db.commit()
    db.refresh(user)

    access_token = create_access_token(data={"sub": user.id})

    log_audit_event(
        event_type="auth.login.success",
        message="User logged in (dev mode)",
        user_id=user.id,
        event_category="authentication",
        auth_method="dev_mode",
    )

    response = JSONResponse(
        content=TokenResponse(
            access_token=access_token, user=UserSchema.model_validate(user)
        ).model_dump(mode="json")
    )
    response.set_cookie(
        key=AUTH_COOKIE_NAME,
        value=access_token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
        max_age=60 * 60,
    )
    return response


@router.post("/logout")
async def logout(request: Request):
    """Clear the auth cookie."""
    auth_token = request.cookies.get(AUTH_COOKIE_NAME)
    if auth_token:
        try:
            payload = decode_token(auth_token)
        except HTTPException:
            payload = {}
        log_audit_event(
            event_type="auth.logout.success",
            message="User logged out",
            event_category="authentication",
            user_id=payload.get("sub"),
        )

    response = JSONResponse(content={"message": "Logged out successfully"})
    response.delete_cookie(
        key=AUTH_COOKIE_NAME,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
    )
    return response


@router.get("/me", response_model=UserSchema)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current user information."""
    return current_user
