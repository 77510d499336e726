from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class DevLoginRequest(BaseModel):
    email: str
    name: Optional[str] = None


class User(BaseModel):
    id: int
    email: str
    name: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: User
