# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Turn a Requestable into a wire-level HttpRequest."""

from __future__ import annotations

import json
import logging

from ..errors import BadRequestError, UnauthorizedError
from ..http.headers import ContentType, HeaderSet
from ..http.models import HttpRequest
from ..http.url import append_query_parameters, form_encode, is_absolute_http_url, merge_query_parameters
from .auth import NoAuthentication
from .requestable import Requestable

logger = logging.getLogger(__name__)


def build_request(request: Requestable) -> HttpRequest:
    """
    Build the wire request for a descriptor without performing any I/O.

    Raises BadRequestError when no valid URL can be formed or the body cannot
    be encoded, and UnauthorizedError when an endpoint that requires
    authentication is called without any.
    """
    configuration = request.configuration

    url = configuration.get_url(request.path, request.authentication)
    if not is_absolute_http_url(url):
        raise BadRequestError(f"Cannot form a valid URL from {configuration.base_url!r} and {str(request.path)!r}")

    if request.method.should_append_query_string():
        query = merge_query_parameters(configuration.default_query_parameters, request.parameters)
    else:
        query = dict(configuration.default_query_parameters or {})
    url = append_query_parameters(url, query)

    if isinstance(request.authentication, NoAuthentication) and request.path.requires_authentication:
        raise UnauthorizedError(f"{request.path} requires authentication")

    headers = HeaderSet()
    request.authentication.apply(headers)
    headers.merge(request.header_fields)
    if "User-Agent" not in headers:
        headers.set("User-Agent", configuration.settings.user_agent)

    body: bytes | None = None
    if request.method.should_add_http_body():
        body = b""
        if request.parameters is not None:
            content_type = headers.content_type
            body = _encode_body(request, content_type)
            if "Content-Type" not in headers:
                headers.set("Content-Type", content_type.mime_type)

    logger.debug("Built %s %s", request.method.value, url)
    return HttpRequest(
        url=url,
        method=request.method.value,
        headers=headers.to_dict(),
        body=body,
        timeout=configuration.settings.timeout,
        allow_redirects=configuration.settings.allow_redirects,
    )


def _encode_body(request: Requestable, content_type: ContentType) -> bytes:
    parameters = request.parameters or {}
    if content_type is ContentType.FORM:
        return form_encode(parameters)
    try:
        return json.dumps(parameters, separators=(",", ":"), allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise BadRequestError(f"Could not encode parameters as JSON: {exc}") from exc


__all__ = ["build_request"]
