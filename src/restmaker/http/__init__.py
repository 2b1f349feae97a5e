# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP transport exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .cookies import CookieStore, default_cookie_store
from .headers import ContentType, HeaderSet, header_value
from .httpx_client import HttpxClient
from .models import Headers, HttpRequest, HttpResponse

__all__ = [
    "ContentType",
    "CookieStore",
    "HeaderSet",
    "Headers",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "StubHttpClient",
    "create_default_http_client",
    "default_cookie_store",
    "header_value",
]
