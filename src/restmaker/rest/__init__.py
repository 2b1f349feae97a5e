# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Declarative REST requests."""

from .auth import Authentication, BearerToken, CustomHeaders, NoAuthentication
from .builder import build_request
from .classifier import classify_response
from .endpoint import Endpoint
from .expected import RAW_BYTES, VOID, Expect, ExpectedResult, Typed
from .maker import RequestMaker
from .method import HTTPMethod
from .requestable import Requestable

__all__ = [
    "Authentication",
    "BearerToken",
    "CustomHeaders",
    "Endpoint",
    "Expect",
    "ExpectedResult",
    "HTTPMethod",
    "NoAuthentication",
    "RAW_BYTES",
    "RequestMaker",
    "Requestable",
    "Typed",
    "VOID",
    "build_request",
    "classify_response",
]
