# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    CANCELLED = "CANCELLED"
    UNAUTHORIZED = "UNAUTHORIZED"
    BAD_REQUEST = "BAD_REQUEST"
    NO_DATA = "NO_DATA"
    DECODING_ERROR = "DECODING_ERROR"
    WARNING = "WARNING"
    TRANSPORT = "TRANSPORT"


class TransportFailure(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    HTTP_STATUS = "HTTP_STATUS"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class NetworkingError(Exception):
    """Base class for every error raised by RequestMaker."""

    kind: ErrorKind = ErrorKind.TRANSPORT

    def __init__(self, message: str | None = None):
        self.message = message or describe_error(self.kind)
        super().__init__(self.message)


class RequestCancelledError(NetworkingError):
    kind = ErrorKind.CANCELLED


class UnauthorizedError(NetworkingError):
    """Raised for 401/403 responses and for unauthenticated calls to protected endpoints."""

    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, message: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class BadRequestError(NetworkingError):
    """The descriptor could not be turned into a wire request."""

    kind = ErrorKind.BAD_REQUEST


class NoDataError(NetworkingError):
    kind = ErrorKind.NO_DATA


class DecodingError(NetworkingError):
    """The body could not be decoded; `raw_body` keeps the bytes for diagnostics."""

    kind = ErrorKind.DECODING_ERROR

    def __init__(self, cause: Exception, raw_body: bytes | None):
        super().__init__(f"{describe_error(self.kind)}: {cause}")
        self.cause = cause
        self.raw_body = raw_body


class ServerWarningError(NetworkingError):
    """Soft warning signalled by the server through a response header."""

    kind = ErrorKind.WARNING

    def __init__(self, message: str, raw_body: bytes | None = None):
        super().__init__(message)
        self.raw_body = raw_body


class TransportError(NetworkingError):
    kind = ErrorKind.TRANSPORT

    def __init__(
        self,
        message: str | None = None,
        *,
        error_type: str | None = None,
        status_code: int | None = None,
        raw_body: bytes | None = None,
        category: TransportFailure = TransportFailure.UNKNOWN_ERROR,
    ):
        super().__init__(message)
        self.error_type = error_type
        self.status_code = status_code
        self.raw_body = raw_body
        self.category = category


def categorize_exception(exc: BaseException) -> TransportFailure:
    """
    Map Python/httpx exceptions to TransportFailure.
    """
    import socket
    import ssl as ssl_module

    import httpx

    if isinstance(exc, httpx.TimeoutException):
        return TransportFailure.TIMEOUT

    if isinstance(exc, httpx.HTTPStatusError):
        return TransportFailure.HTTP_STATUS

    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)):
        return TransportFailure.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return TransportFailure.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        # httpx wraps resolver/TLS failures in ConnectError; look at the cause.
        cause = exc.__cause__ or exc.__context__
        if cause is not None and cause is not exc:
            nested = categorize_exception(cause)
            if nested in (TransportFailure.SSL_ERROR, TransportFailure.DNS_ERROR):
                return nested
        return TransportFailure.CONNECTION_ERROR

    if isinstance(exc, ConnectionError):
        return TransportFailure.CONNECTION_ERROR

    return TransportFailure.UNKNOWN_ERROR


def describe_error(kind: ErrorKind | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorKind.CANCELLED: "Request was cancelled",
        ErrorKind.UNAUTHORIZED: "Not authorized to access this resource",
        ErrorKind.BAD_REQUEST: "Request could not be built",
        ErrorKind.NO_DATA: "Response contained no data",
        ErrorKind.DECODING_ERROR: "Response data could not be decoded",
        ErrorKind.WARNING: "Server returned a warning",
        ErrorKind.TRANSPORT: "Network error during request",
        None: "",
    }
    return mapping.get(kind, "Request failed due to network error")


__all__ = [
    "BadRequestError",
    "DecodingError",
    "ErrorKind",
    "NetworkingError",
    "NoDataError",
    "RequestCancelledError",
    "ServerWarningError",
    "TransportError",
    "TransportFailure",
    "UnauthorizedError",
    "categorize_exception",
    "describe_error",
]
