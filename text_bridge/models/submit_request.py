"""Request model for the HTTP host."""

from pydantic import BaseModel, Field, field_validator


class SubmitRequest(BaseModel):
    """Text submitted through ``POST /submit``.

    Blank submissions are refused here, before the bridge is involved,
    so the client gets a 422 instead of a pointless round trip.
    """

    text: str = Field(
        ...,
        description="The text to forward to the remote endpoint."
    )

    @field_validator("text")
    def validate_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Please enter some text")
        return value
