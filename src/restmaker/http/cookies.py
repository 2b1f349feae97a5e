# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Cookie persistence for responses handled by RequestMaker."""

from __future__ import annotations

import logging
import threading
import urllib.request
from urllib.parse import urlsplit

import httpx

from .headers import header_value
from .models import HttpResponse

logger = logging.getLogger(__name__)


class CookieStore:
    """
    Handle around an `httpx.Cookies` jar.

    Only the first Set-Cookie header of a response is stored. The jar decides
    scope and expiry the way a browser would.
    """

    def __init__(self, cookies: httpx.Cookies | None = None):
        self.cookies = cookies if cookies is not None else httpx.Cookies()

    def store(self, set_cookie: str, url: str) -> bool:
        """
        Hand a single Set-Cookie value for `url` to the jar.

        The jar applies the cookie attributes: Domain and Path scope the
        cookie, an elapsed Expires or Max-Age=0 removes it, and host-only
        cookies stay bound to the request host. Returns False when there was
        nothing to hand over.
        """
        if not set_cookie or not url:
            return False
        try:
            if not urlsplit(url).hostname:
                return False
            carrier = httpx.Response(
                200,
                headers=[("Set-Cookie", set_cookie)],
                request=httpx.Request("GET", url),
            )
        except (httpx.InvalidURL, ValueError) as exc:
            logger.info("Ignoring Set-Cookie for unusable URL %s: %s", url, exc)
            return False
        self.cookies.extract_cookies(carrier)
        logger.debug("Stored Set-Cookie for %s", url)
        return True

    def store_from_response(self, response: HttpResponse) -> bool:
        """Store the first cookie carried by a transport outcome, if any."""
        if not response.url:
            return False
        raw = response.meta.get("set_cookie")
        if isinstance(raw, (list, tuple)) and raw:
            first = str(raw[0])
        else:
            first = header_value(response.headers, "Set-Cookie")
        if not first:
            return False
        return self.store(first, response.url)

    def cookie_header(self, url: str) -> str | None:
        """Return the Cookie header value the jar would send to `url`."""
        outgoing = urllib.request.Request(url)
        self.cookies.jar.add_cookie_header(outgoing)
        return outgoing.get_header("Cookie")

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.cookies.get(name, default)

    def clear(self) -> None:
        self.cookies.clear()

    def __len__(self) -> int:
        return len(self.cookies.jar)


_default_store: CookieStore | None = None
_default_store_lock = threading.Lock()


def default_cookie_store() -> CookieStore:
    """Return the process-wide store for callers that want shared cookie state."""
    global _default_store
    with _default_store_lock:
        if _default_store is None:
            _default_store = CookieStore()
        return _default_store


__all__ = ["CookieStore", "default_cookie_store"]
