# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP methods and where they carry their parameters."""

from enum import Enum


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    def should_append_query_string(self) -> bool:
        return self in _QUERY_METHODS

    def should_add_http_body(self) -> bool:
        return self in _BODY_METHODS


_QUERY_METHODS = frozenset({HTTPMethod.GET, HTTPMethod.DELETE, HTTPMethod.HEAD, HTTPMethod.OPTIONS})
_BODY_METHODS = frozenset({HTTPMethod.POST, HTTPMethod.PUT, HTTPMethod.PATCH})

__all__ = ["HTTPMethod"]
