# ticketdesk/core/result.py
"""Uniform outcome envelope returned by controller operations."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

T = TypeVar("T")

DEFAULT_OK_MESSAGE = "Operación realizada correctamente."


class OperationResult(BaseModel, Generic[T]):
    """
    Success/failure of a use case.

    - success: whether the operation completed
    - message: text the view may show to the user
    - data: payload for the view to refresh itself, None on failure

    Build it with ``ok`` or ``fail``.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    message: str
    data: Optional[T] = None

    @model_validator(mode="after")
    def _failure_has_no_data(self):
        if not self.success and self.data is not None:
            raise ValueError("a failed result cannot carry data")
        return self

    @classmethod
    def ok(cls, data: Optional[T] = None, message: str = DEFAULT_OK_MESSAGE) -> "OperationResult[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, message: str) -> "OperationResult[T]":
        return cls(success=False, message=message)
