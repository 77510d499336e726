from pydantic import BaseModel
from typing import Optional


class Toast(BaseModel):
    """A transient notification shown by the UI."""

    title: str
    description: Optional[str] = None
    icon: Optional[str] = None
    color: str = "success"
