"""Service forwarding caller text to the configured remote endpoint.

The :class:`RequestBridge` wraps a string in a JSON :class:`Envelope`,
POSTs it to the endpoint from :class:`BridgeConfig` and hands back an
:class:`Outcome`.  Every failure mode (unreachable endpoint, non-2xx
status, undecodable payload, caller cancellation) comes back as a
:class:`Failure` carrying its kind; ``send`` does not raise for them.

Hosts only differ in how they await the call: async hosts (the FastAPI
app) ``await send(...)``, blocking hosts (the CLI) use ``send_sync``.
"""

from __future__ import annotations

import asyncio
from functools import lru_cache

import httpx
from loguru import logger

from ..config.bridge_config import BridgeConfig, get_bridge_config
from ..models.envelope import Envelope
from ..models.outcome import Outcome, Success
from ..utils import api_client
from ..utils.error_handler import (
    DecodeError,
    StatusError,
    TransportError,
    handle_bridge_error,
)

JSON_HEADERS = {"Content-Type": "application/json"}


class RequestBridge:
    """Single request/response exchange with one remote endpoint.

    The bridge holds no per-call state.  Concurrent ``send`` calls are
    independent: each builds its own envelope and, unless an
    ``httpx.AsyncClient`` was injected, its own short-lived client.
    """

    def __init__(
        self,
        config: BridgeConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the bridge.

        Parameters
        ----------
        config: BridgeConfig, optional
            Endpoint settings.  Loaded from the environment via
            :func:`get_bridge_config` when omitted.
        client: httpx.AsyncClient, optional
            Client to issue requests with.  The caller owns it and is
            responsible for closing it.  Mostly useful for pointing the
            bridge at a mock transport.
        """
        self.config = config or get_bridge_config()
        self._client = client

    @property
    def endpoint_url(self) -> str:
        return self.config.endpoint_url

    @handle_bridge_error
    async def send(self, text: str) -> Outcome:
        """Forward ``text`` and return the endpoint's answer.

        Returns
        -------
        Outcome
            :class:`Success` with the raw response body for a 2xx answer,
            otherwise a :class:`Failure` describing what went wrong.
        """
        payload = self._serialise(text)
        logger.debug(
            "POST {} ({} bytes, field={})",
            self.endpoint_url,
            len(payload),
            self.config.envelope_field.value,
        )
        try:
            response = await api_client.post(
                self.endpoint_url,
                content=payload,
                headers=JSON_HEADERS,
                client=self._client,
                timeout=self.config.timeout,
            )
        except httpx.DecodingError as exc:
            raise DecodeError(f"response decoding failed: {_describe(exc)}") from exc
        except httpx.TimeoutException as exc:
            raise TransportError(f"transport error: timed out ({_describe(exc)})") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"transport error: {_describe(exc)}") from exc
        except httpx.InvalidURL as exc:
            raise TransportError(f"transport error: invalid endpoint URL ({exc})") from exc

        if not response.is_success:
            # The error body is only kept for diagnostics.
            logger.warning(
                "Endpoint {} responded {} {}: {!r}",
                self.endpoint_url,
                response.status_code,
                response.reason_phrase,
                response.content[:2048],
            )
            raise StatusError(
                f"HTTP {response.status_code} {response.reason_phrase}".rstrip(),
                status_code=response.status_code,
            )

        body = self._decode(response)
        logger.info(
            "Endpoint {} responded {} ({} characters)",
            self.endpoint_url,
            response.status_code,
            len(body),
        )
        return Success(text=body)

    def send_sync(self, text: str) -> Outcome:
        """Blocking variant of :meth:`send` for hosts without an event loop."""
        return asyncio.run(self.send(text))

    def _serialise(self, text: str) -> bytes:
        try:
            envelope = Envelope(text=text, field_name=self.config.envelope_field)
            return envelope.to_json()
        except (TypeError, ValueError) as exc:
            # UnicodeEncodeError and pydantic's ValidationError are ValueErrors.
            raise DecodeError(f"serialization error: {exc}") from exc

    @staticmethod
    def _decode(response: httpx.Response) -> str:
        encoding = response.encoding or "utf-8"
        try:
            return response.content.decode(encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise DecodeError(
                f"response body is not valid {encoding} text: {exc}",
                status_code=response.status_code,
            ) from exc


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


@lru_cache()
def get_request_bridge() -> RequestBridge:
    """Return a cached bridge built from the environment configuration."""

    return RequestBridge()
