# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header containers and lookup utilities.

HTTP header field names are case-insensitive (RFC 9110). Transports hand back
plain dicts with whatever casing the server used, so reads go through
`header_value()` rather than direct indexing.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


class ContentType(str, Enum):
    JSON = "json"
    FORM = "form"

    @property
    def mime_type(self) -> str:
        return FORM_CONTENT_TYPE if self is ContentType.FORM else JSON_CONTENT_TYPE


class HeaderSet:
    """
    Case-insensitive header mapping with at most one value per name.

    Setting a name that already exists replaces the value (last write wins) but
    keeps the original casing and position, so emission order is deterministic.
    """

    def __init__(self, headers: Mapping[str, str] | HeaderSet | None = None):
        self._items: dict[str, tuple[str, str]] = {}
        if headers:
            self.merge(headers)

    @classmethod
    def json(cls, headers: Mapping[str, str] | None = None) -> HeaderSet:
        result = cls({"Content-Type": JSON_CONTENT_TYPE})
        if headers:
            result.merge(headers)
        return result

    @classmethod
    def form(cls, headers: Mapping[str, str] | None = None) -> HeaderSet:
        result = cls({"Content-Type": FORM_CONTENT_TYPE})
        if headers:
            result.merge(headers)
        return result

    @property
    def content_type(self) -> ContentType:
        raw = self.get("Content-Type") or ""
        mime = raw.split(";", 1)[0].strip().lower()
        return ContentType.FORM if mime == FORM_CONTENT_TYPE else ContentType.JSON

    def set(self, name: str, value: str) -> None:
        key = str(name).strip().lower()
        if not key:
            raise ValueError("Header name must not be empty")
        original = self._items[key][0] if key in self._items else str(name).strip()
        self._items[key] = (original, "" if value is None else str(value))

    def get(self, name: str, default: str | None = None) -> str | None:
        item = self._items.get(str(name).strip().lower())
        return item[1] if item is not None else default

    def remove(self, name: str) -> bool:
        return self._items.pop(str(name).strip().lower(), None) is not None

    def merge(self, other: Mapping[str, str] | HeaderSet) -> HeaderSet:
        """Copy every header from `other` into this set, overriding on conflict."""
        for name, value in other.items():
            self.set(name, value)
        return self

    def items(self) -> list[tuple[str, str]]:
        return list(self._items.values())

    def to_dict(self) -> dict[str, str]:
        return dict(self._items.values())

    def copy(self) -> HeaderSet:
        return HeaderSet(self)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._items

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HeaderSet):
            return {k: v for k, (_, v) in self._items.items()} == {k: v for k, (_, v) in other._items.items()}
        return NotImplemented

    def __repr__(self) -> str:
        return f"HeaderSet({self.to_dict()!r})"


def header_value(headers: Mapping[Any, Any] | None, name: str, default: str = "") -> str:
    """
    Return a header value using case-insensitive key matching.

    Fast-paths common key casings before falling back to a full scan.
    """
    if not headers or not name:
        return default

    lower = str(name).lower()
    for key in (name, lower, lower.title()):
        if key in headers:
            value = headers.get(key)
            return default if value is None else str(value).strip()

    for key, value in headers.items():
        if key is None:
            continue
        if str(key).lower() == lower:
            return default if value is None else str(value).strip()

    return default


__all__ = [
    "ContentType",
    "FORM_CONTENT_TYPE",
    "HeaderSet",
    "JSON_CONTENT_TYPE",
    "header_value",
]
