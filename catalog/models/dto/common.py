from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class DataEnvelope(BaseModel, Generic[T]):
    data: T


class ApiResponse(BaseModel, Generic[T]):
    message: str
    response: DataEnvelope[T] | None = None
    error: str | dict[str, Any] | None = None
