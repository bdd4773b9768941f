"""Result of a single bridge call."""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from .enums import FailureKind


class Success(BaseModel):
    """The endpoint answered with 2xx; ``text`` is its raw body."""

    status: Literal["success"] = "success"
    text: str

    @property
    def ok(self) -> bool:
        return True


class Failure(BaseModel):
    """The call produced no usable body.

    ``error_type`` tells transport, status, decode and cancellation
    failures apart.  ``status_code`` carries the HTTP status whenever a
    response was received (status failures, and decode failures of a 2xx
    body); it is ``None`` when the endpoint never answered.
    """

    status: Literal["failure"] = "failure"
    error_type: FailureKind
    reason: str
    status_code: Optional[int] = Field(
        default=None,
        description="HTTP status returned by the endpoint, when one was received.",
    )

    @property
    def ok(self) -> bool:
        return False


Outcome = Annotated[Union[Success, Failure], Field(discriminator="status")]
