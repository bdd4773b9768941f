"""Error handling utilities and custom exceptions."""

from __future__ import annotations

import asyncio

from fastapi import Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from ..models.enums import FailureKind
from ..models.outcome import Failure


class BridgeError(Exception):
    """Base class for failures of a bridge call.

    Every subclass maps to one :class:`FailureKind` so that the error can
    be reported to callers as a :class:`Failure` outcome instead of being
    raised into the host.
    """

    kind: FailureKind

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code

    def to_failure(self) -> Failure:
        return Failure(
            error_type=self.kind,
            reason=self.reason,
            status_code=self.status_code,
        )


class TransportError(BridgeError):
    """The request never reached the remote party."""

    kind = FailureKind.TRANSPORT


class StatusError(BridgeError):
    """The remote party answered with a non-2xx status."""

    kind = FailureKind.STATUS


class DecodeError(BridgeError):
    """The request could not be serialised or the response not decoded."""

    kind = FailureKind.DECODE


class CancellationError(BridgeError):
    """The caller cancelled the call before it completed."""

    kind = FailureKind.CANCELLED


_ERRORS_BY_KIND: dict[FailureKind, type[BridgeError]] = {
    cls.kind: cls for cls in (TransportError, StatusError, DecodeError, CancellationError)
}

_HTTP_STATUS_BY_KIND = {
    FailureKind.TRANSPORT: status.HTTP_502_BAD_GATEWAY,
    FailureKind.STATUS: status.HTTP_502_BAD_GATEWAY,
    FailureKind.DECODE: status.HTTP_502_BAD_GATEWAY,
    FailureKind.CANCELLED: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_from_failure(failure: Failure) -> BridgeError:
    """Rebuild the exception matching a :class:`Failure` outcome."""
    return _ERRORS_BY_KIND[failure.error_type](failure.reason, failure.status_code)


async def http_exception_handler(request: Request, exc: BridgeError) -> JSONResponse:
    """Convert a BridgeError into a gateway error response."""
    logger.error("BridgeError occurred: {}", exc)
    return JSONResponse(
        status_code=_HTTP_STATUS_BY_KIND[exc.kind],
        content=exc.to_failure().model_dump(mode="json"),
    )

# ---------------------------------------------------------------------------
# Decorator for asynchronous bridge methods

from functools import wraps
from typing import Any, Awaitable, Callable


def handle_bridge_error(
    func: Callable[..., Awaitable[Any]],
) -> Callable[..., Awaitable[Any]]:
    """Decorator turning bridge errors into :class:`Failure` outcomes.

    A :class:`BridgeError` raised by the wrapped coroutine is logged and
    returned as a failure.  Cancellation of the awaiting task abandons the
    in-flight work and also resolves to a failure, of kind ``cancelled``.
    Any other exception is a bug and propagates unchanged.

    The cancellation is absorbed here: a task cancelled while awaiting the
    wrapped coroutine is not left cancelled, so code after the call keeps
    running.  Hosts that wrap ``send`` in their own ``asyncio.timeout`` or
    cancel scope must check for a ``cancelled`` failure and stop themselves.
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except BridgeError as exc:
            logger.warning("{} failed ({}): {}", func.__name__, exc.kind.value, exc)
            return exc.to_failure()
        except asyncio.CancelledError:
            logger.warning("{} cancelled before the endpoint answered", func.__name__)
            return CancellationError("request cancelled by caller").to_failure()

    return wrapper
