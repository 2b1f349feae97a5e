# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Synchronous request execution: build, send, classify, decode."""

from __future__ import annotations

import logging
from contextlib import suppress
from typing import Any, TypeVar, overload

from ..errors import DecodingError, NoDataError, UnauthorizedError
from ..http.client import HttpClient, create_default_http_client
from ..http.cookies import CookieStore
from ..http.headers import header_value
from ..http.models import HttpResponse
from .builder import build_request
from .classifier import classify_response
from .expected import Expect, ExpectedResult, Typed
from .requestable import Requestable

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RequestMaker:
    """
    Performs Requestables against an HttpClient, one blocking call at a time.

    The transport and cookie store are injected; when no transport is given,
    one is created from the first descriptor's configuration settings and
    closed by `close()`.
    """

    def __init__(self, http_client: HttpClient | None = None, cookie_store: CookieStore | None = None):
        self.http_client = http_client
        self.cookie_store = cookie_store
        self._owns_client = http_client is None

    def perform_request(self, request: Requestable) -> HttpResponse:
        """Send the request and return the classified outcome, raising NetworkingError subclasses."""
        wire = build_request(request)

        if self.cookie_store is not None and not header_value(wire.headers, "Cookie"):
            cookie = self.cookie_store.cookie_header(wire.url)
            if cookie:
                wire.headers = {**(wire.headers or {}), "Cookie": cookie}

        client = self._client_for(request)
        with request.running():
            try:
                response = client.request(wire)
            except Exception as exc:  # noqa: BLE001
                logger.debug("Transport raised for %s %s: %s", wire.method, wire.url, exc)
                response = HttpResponse.from_exception(exc, url=wire.url)
        if response.url is None:
            response.url = wire.url

        try:
            classify_response(response, request.configuration.settings)
        except UnauthorizedError:
            if request.log_out_if_unauthorized:
                self._handle_unauthorized(request)
            raise

        if self.cookie_store is not None:
            self.cookie_store.store_from_response(response)
        return response

    @overload
    def perform(self, request: Requestable, expecting: Typed[T]) -> T: ...

    @overload
    def perform(self, request: Requestable, expecting: Expect) -> Any: ...

    def perform(self, request: Requestable, expecting: ExpectedResult) -> Any:
        """Perform the request and convert the body as described by `expecting`."""
        response = self.perform_request(request)

        if expecting is Expect.VOID:
            return None

        if response.content is None:
            raise NoDataError()

        if expecting is Expect.RAW_BYTES:
            return response.content

        if isinstance(expecting, Typed):
            if not response.content:
                raise NoDataError()
            try:
                return request.configuration.decoder.decode(response.content, expecting.type_)
            except Exception as exc:  # noqa: BLE001
                logger.warning("Failed to decode response from %s: %s", response.url, exc)
                raise DecodingError(exc, response.content) from exc

        raise TypeError(f"Unsupported expected result: {expecting!r}")

    def _client_for(self, request: Requestable) -> HttpClient:
        if self.http_client is None:
            self.http_client = create_default_http_client(request.configuration.settings)
        return self.http_client

    def _handle_unauthorized(self, request: Requestable) -> None:
        handler = request.configuration.default_unauthorized_handler
        if handler is None:
            return
        try:
            handler()
        except Exception:  # noqa: BLE001
            logger.exception("Unauthorized handler failed for %s", request.path)

    def close(self) -> None:
        if not self._owns_client or self.http_client is None:
            return
        with suppress(Exception):
            self.http_client.close()
        self.http_client = None

    def __enter__(self) -> RequestMaker:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


__all__ = ["RequestMaker"]
