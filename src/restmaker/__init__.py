# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
restmaker package entrypoint.

Requests are described declaratively with `Requestable`, built into wire
requests, sent through an injectable `HttpClient`, and classified into a small
set of typed errors. Calls are synchronous: `RequestMaker` blocks until the
transport completes.
"""

from .config import Configuration, HttpSettings, load_http_settings
from .decoding import Decoder, JsonDecoder
from .errors import (
    BadRequestError,
    DecodingError,
    ErrorKind,
    NetworkingError,
    NoDataError,
    RequestCancelledError,
    ServerWarningError,
    TransportError,
    UnauthorizedError,
)
from .http import (
    CookieStore,
    HeaderSet,
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
    default_cookie_store,
)
from .log import setup_logging
from .rest import (
    RAW_BYTES,
    VOID,
    BearerToken,
    CustomHeaders,
    Endpoint,
    HTTPMethod,
    NoAuthentication,
    RequestMaker,
    Requestable,
    Typed,
)
from .version import __version__

__all__ = [
    "BadRequestError",
    "BearerToken",
    "Configuration",
    "CookieStore",
    "CustomHeaders",
    "DecodingError",
    "Decoder",
    "Endpoint",
    "ErrorKind",
    "HTTPMethod",
    "HeaderSet",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "JsonDecoder",
    "NetworkingError",
    "NoAuthentication",
    "NoDataError",
    "RAW_BYTES",
    "RequestCancelledError",
    "RequestMaker",
    "Requestable",
    "ServerWarningError",
    "StubHttpClient",
    "TransportError",
    "Typed",
    "UnauthorizedError",
    "VOID",
    "create_default_http_client",
    "default_cookie_store",
    "load_http_settings",
    "setup_logging",
    "__version__",
]
