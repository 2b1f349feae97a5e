# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Wire-level request and transport outcome models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import categorize_exception

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Fully resolved request handed to an HttpClient."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    body: bytes | None = None
    timeout: float | None = None
    allow_redirects: bool = True


@dataclass
class HttpResponse:
    """
    Outcome of one transport call.

    `ok=False` covers both transport failures (no status code) and HTTP error
    statuses; `content` may still carry the server's body in the latter case.
    """

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    content: bytes | None = None
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    cancelled: bool = False
    meta: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: BaseException, *, url: str | None = None) -> HttpResponse:
        """Build a failed outcome from an exception raised while sending."""
        return cls(
            ok=False,
            url=url,
            error_message=str(exc) or type(exc).__name__,
            error_type=type(exc).__name__,
            meta={"error_category": categorize_exception(exc).value},
        )

