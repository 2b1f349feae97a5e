# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging
import threading

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import TransportFailure
from .client import HttpClient
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class HttpxClient(HttpClient):
    """
    Synchronous httpx client wrapper.

    `cancel()` may be called from another thread while a request is in
    flight; that request then completes as a cancelled outcome. A cancel with
    nothing in flight is a no-op.
    """

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )
        self._cancel_requested = threading.Event()
        self._in_flight = False
        self._active: httpx.Response | None = None
        self._lock = threading.Lock()

    def cancel(self) -> None:
        with self._lock:
            if not self._in_flight:
                return
            self._cancel_requested.set()
            active = self._active
        if active is not None:
            active.close()

    def request(self, request: HttpRequest) -> HttpResponse:
        with self._lock:
            self._cancel_requested.clear()
            self._in_flight = True
        try:
            return self._send(request)
        finally:
            with self._lock:
                self._in_flight = False
                self._active = None

    def _send(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)
        timeout = request.timeout if request.timeout is not None else self.settings.timeout

        try:
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                content=request.body,
                timeout=timeout,
                follow_redirects=request.allow_redirects,
            ) as resp:
                with self._lock:
                    self._active = resp
                content = bytearray()
                for chunk in resp.iter_bytes():
                    if self._cancel_requested.is_set():
                        return self._cancelled(request.url)
                    content.extend(chunk)
        except Exception as exc:  # noqa: BLE001
            if self._cancel_requested.is_set():
                return self._cancelled(request.url)
            logger.debug("%s %s failed: %s", request.method, request.url, exc)
            return HttpResponse.from_exception(exc, url=request.url)

        if self._cancel_requested.is_set():
            return self._cancelled(request.url)

        status = resp.status_code
        response = HttpResponse(
            ok=status < 400,
            status_code=status,
            headers=dict(resp.headers),
            content=bytes(content),
            url=str(resp.url),
        )
        # dict(httpx.Headers) comma-joins repeated fields, which mangles cookies.
        set_cookie = resp.headers.get_list("set-cookie")
        if set_cookie:
            response.meta["set_cookie"] = set_cookie
        if status >= 400:
            response.error_message = f"HTTP {status} {resp.reason_phrase}".strip()
            response.error_type = "HTTPStatusError"
            response.meta["error_category"] = TransportFailure.HTTP_STATUS.value
        return response

    def _cancelled(self, url: str) -> HttpResponse:
        logger.debug("Request to %s cancelled", url)
        return HttpResponse(ok=False, url=url, cancelled=True, error_message="cancelled", error_type="Cancelled")

    def close(self) -> None:
        self._client.close()
