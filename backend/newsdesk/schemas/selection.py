from pydantic import BaseModel
from typing import Generic, List, TypeVar

T = TypeVar("T")


class SelectOption(BaseModel):
    label: str
    value: int


class AsyncDataState(BaseModel, Generic[T]):
    """Snapshot of one selection source: its data and whether it is still loading."""

    data: List[T] = []
    pending: bool = True


class SelectionOptionsResponse(BaseModel):
    authors: AsyncDataState[str]
    categories: AsyncDataState[str]
    newspapers: AsyncDataState[SelectOption]
