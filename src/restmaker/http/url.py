# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers used when building wire requests."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

logger = logging.getLogger(__name__)


def is_absolute_http_url(url: str) -> bool:
    """Return True when the URL has an http(s) scheme and a host."""
    try:
        parts = urlsplit(str(url or ""))
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.hostname)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def query_pairs(parameters: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """
    Flatten a parameter mapping into ordered (key, value) pairs.

    None values are skipped and list/tuple values repeat the key.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in (parameters or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((str(key), _query_value(item)) for item in value if item is not None)
        else:
            pairs.append((str(key), _query_value(value)))
    return pairs


def merge_query_parameters(
    defaults: Mapping[str, Any] | None,
    overrides: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """
    Merge default and request-level query parameters.

    Request-level values win on key collision; the key keeps the position it
    had among the defaults.
    """
    merged: dict[str, Any] = dict(defaults or {})
    for key, value in (overrides or {}).items():
        if key in merged and merged[key] != value:
            logger.debug("Request parameter %r overrides default query value", key)
        merged[key] = value
    return merged


def append_query_parameters(url: str, parameters: Mapping[str, Any] | None) -> str:
    """
    Append parameters to a URL's query string.

    Keys already present in the URL are kept ahead of the appended ones.
    """
    pairs = query_pairs(parameters)
    if not pairs:
        return url
    parts = urlsplit(url)
    existing = parse_qsl(parts.query, keep_blank_values=True)
    query = urlencode(existing + pairs, quote_via=quote)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def form_encode(parameters: Mapping[str, Any]) -> bytes:
    """Percent-encode parameters as an application/x-www-form-urlencoded body."""
    return urlencode(query_pairs(parameters), quote_via=quote).encode("ascii")


__all__ = [
    "append_query_parameters",
    "form_encode",
    "is_absolute_http_url",
    "merge_query_parameters",
    "query_pairs",
]
