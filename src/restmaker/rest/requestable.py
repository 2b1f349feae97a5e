# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request descriptors consumed by RequestMaker."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from ..config import Configuration
from ..http.headers import HeaderSet
from .auth import Authentication, NoAuthentication
from .endpoint import Endpoint
from .method import HTTPMethod


@dataclass
class Requestable:
    """
    Description of one HTTP call.

    A descriptor is built right before use and handed to a single
    `RequestMaker` call at a time; it is not safe to share across threads.
    """

    path: Endpoint
    configuration: Configuration
    method: HTTPMethod = HTTPMethod.GET
    parameters: Mapping[str, Any] | None = None
    header_fields: HeaderSet = field(default_factory=HeaderSet.json)
    authentication: Authentication = field(default_factory=NoAuthentication)
    log_out_if_unauthorized: bool = True
    is_running: bool = field(default=False, init=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.path, str):
            self.path = Endpoint(self.path)
        if isinstance(self.method, str) and not isinstance(self.method, HTTPMethod):
            self.method = HTTPMethod(self.method.upper())
        if not isinstance(self.header_fields, HeaderSet):
            self.header_fields = HeaderSet(self.header_fields)

    @contextmanager
    def running(self) -> Iterator[Requestable]:
        """Mark the descriptor as in flight until the block exits, however it exits."""
        self.is_running = True
        try:
            yield self
        finally:
            self.is_running = False


__all__ = ["Requestable"]
