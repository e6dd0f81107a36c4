from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .._utils.constants import SUCCESS_CODE

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapping every Interlace API response.

    The payload type is bound where the call is made, e.g.
    ``ApiResponse[AccountData]``.
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        coerce_numbers_to_str=True,
        extra="allow",
    )

    code: str
    message: str = ""
    data: Optional[T] = None

    @property
    def is_success(self) -> bool:
        return self.code == SUCCESS_CODE


class ErrorPayload(BaseModel):
    """Body returned by the API alongside a 4xx/5xx status."""

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="allow")

    code: str = ""
    message: str = ""
    data: Optional[Any] = Field(default=None)
