"""Wire representation of the caller's text."""

import json

from pydantic import BaseModel, Field

from .enums import EnvelopeField


class Envelope(BaseModel):
    """Single-field JSON document wrapping the text to forward.

    An envelope is built fresh for every call and thrown away once the
    request has been sent.
    """

    text: str
    field_name: EnvelopeField = Field(
        default=EnvelopeField.BODY,
        description="Key under which ``text`` is placed on the wire.",
    )

    def to_payload(self) -> dict[str, str]:
        return {self.field_name.value: self.text}

    def to_json(self) -> bytes:
        """Serialise to UTF-8 JSON bytes.

        Raises ``UnicodeEncodeError`` for text that has no UTF-8 form
        (for example lone surrogates).
        """
        return json.dumps(self.to_payload(), ensure_ascii=False).encode("utf-8")
