# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Map transport outcomes onto restmaker's error taxonomy."""

from __future__ import annotations

import re

from ..config import HttpSettings, load_http_settings
from ..errors import (
    RequestCancelledError,
    ServerWarningError,
    TransportError,
    TransportFailure,
    UnauthorizedError,
)
from ..http.headers import header_value
from ..http.models import HttpResponse

UNAUTHORIZED_STATUS_CODES = frozenset({401, 403})

# RFC 7234 warning-value: warn-code SP warn-agent SP warn-text [SP warn-date]
_WARNING_VALUE_RE = re.compile(r'^\s*\d{3}\s+\S+\s+"(?P<text>(?:[^"\\]|\\.)*)"')


def parse_warning(value: str) -> str | None:
    """Return the human-readable part of a warning header value."""
    raw = (value or "").strip()
    if not raw:
        return None
    match = _WARNING_VALUE_RE.match(raw)
    if match:
        return re.sub(r"\\(.)", r"\1", match.group("text")) or raw
    return raw


def classify_response(response: HttpResponse, settings: HttpSettings | None = None) -> HttpResponse:
    """
    Return the outcome unchanged on success, otherwise raise the matching error.

    Order: cancellation, 401/403, server warning header, any other failure.
    """
    settings = settings or load_http_settings()

    if response.cancelled:
        raise RequestCancelledError()

    if response.status_code in UNAUTHORIZED_STATUS_CODES:
        raise UnauthorizedError(status_code=response.status_code)

    warning = parse_warning(header_value(response.headers, settings.warning_header))
    if warning:
        raise ServerWarningError(warning, response.content)

    if not response.ok:
        category = response.meta.get("error_category")
        try:
            failure = TransportFailure(category) if category else TransportFailure.UNKNOWN_ERROR
        except ValueError:
            failure = TransportFailure.UNKNOWN_ERROR
        raise TransportError(
            response.error_message,
            error_type=response.error_type,
            status_code=response.status_code,
            raw_body=response.content,
            category=failure,
        )

    return response


__all__ = ["UNAUTHORIZED_STATUS_CODES", "classify_response", "parse_warning"]
