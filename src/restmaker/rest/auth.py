# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Authentication variants applied to outgoing headers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from ..http.headers import HeaderSet


@dataclass(frozen=True)
class NoAuthentication:
    def apply(self, headers: HeaderSet) -> None:  # noqa: ARG002
        return None


@dataclass(frozen=True)
class BearerToken:
    token: str

    def apply(self, headers: HeaderSet) -> None:
        headers.set("Authorization", f"Bearer {self.token}")

    def __repr__(self) -> str:
        return "BearerToken(token='***')"


@dataclass(frozen=True)
class CustomHeaders:
    headers: HeaderSet = field(default_factory=HeaderSet)

    def __post_init__(self) -> None:
        # Take a private copy so later edits to the caller's HeaderSet don't leak in.
        object.__setattr__(self, "headers", HeaderSet(self.headers))

    def apply(self, headers: HeaderSet) -> None:
        headers.merge(self.headers)


Authentication = Union[NoAuthentication, BearerToken, CustomHeaders]

__all__ = ["Authentication", "BearerToken", "CustomHeaders", "NoAuthentication"]
