# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process HttpClient implementations."""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import urlsplit, urlunsplit

from .client import HttpClient
from .models import HttpRequest, HttpResponse

Responder = Callable[[HttpRequest], HttpResponse]


def _strip_query(url: str) -> str:
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests.

    Responses are looked up by "METHOD url", then by exact URL, then by URL
    without its query string. A registered value may be an HttpResponse, a
    callable receiving the request, or an exception to raise.
    """

    def __init__(self, responses: dict[str, HttpResponse | Responder | BaseException] | None = None):
        self._responses = dict(responses or {})
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse | Responder | BaseException, *, method: str | None = None) -> None:
        key = f"{method.upper()} {url}" if method else url
        self._responses[key] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        for key in (f"{request.method.upper()} {request.url}", request.url, _strip_query(request.url)):
            if key in self._responses:
                entry = self._responses[key]
                if isinstance(entry, BaseException):
                    raise entry
                if callable(entry) and not isinstance(entry, HttpResponse):
                    return entry(request)
                return entry
        return HttpResponse(ok=False, status_code=None, url=request.url, error_message="No stubbed response configured")

    def close(self) -> None:
        self.closed = True
