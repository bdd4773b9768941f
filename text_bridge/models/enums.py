"""Enumerations used across models."""

from enum import Enum


class EnvelopeField(str, Enum):
    """Name of the single JSON field that carries the caller's text.

    Receivers disagree on the key they read: ``body`` is what the bridge
    sends unless configured otherwise, ``text`` is accepted for endpoints
    that expect it.
    """

    BODY = "body"
    TEXT = "text"


class FailureKind(str, Enum):
    """Why a bridge call did not produce a response body.

    ``TRANSPORT`` means the remote party was never reached (DNS, refused
    connection, TLS, reset, timeout).  ``STATUS`` means it answered with
    a non-2xx code.  ``DECODE`` covers request serialization and response
    decoding problems.  ``CANCELLED`` means the caller gave up before the
    exchange completed.
    """

    TRANSPORT = "transport"
    STATUS = "status"
    DECODE = "decode"
    CANCELLED = "cancelled"
