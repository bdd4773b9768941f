"""Expose commonly used model classes at the package level.

Importing these classes here allows consumers to write concise imports like::

    from text_bridge.models import Envelope, Success, Failure
"""

from .envelope import Envelope  # noqa: F401
from .outcome import Failure, Outcome, Success  # noqa: F401
from .submit_request import SubmitRequest  # noqa: F401
from .enums import EnvelopeField, FailureKind  # noqa: F401
