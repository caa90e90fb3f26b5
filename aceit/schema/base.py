# aceit/schema/base.py
from typing import Generic, TypeVar, Optional
from pydantic import BaseModel

# Generic type for the data field
T = TypeVar("T")


class ErrorDetail(BaseModel):
    type: str
    detail: str


class BaseResponse(BaseModel, Generic[T]):
    status: bool = True
    message: str = "Success"
    data: Optional[T] = None
    error: Optional[ErrorDetail] = None

    class Config:
        from_attributes = True

    @classmethod
    def failure(cls, error_type: str, detail: str) -> "BaseResponse":
        """Envelope for a failed request, with no payload"""
        return cls(
            status=False,
            message=detail,
            error=ErrorDetail(type=error_type, detail=detail),
        )
