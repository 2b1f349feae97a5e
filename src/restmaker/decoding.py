# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Response body decoders."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from typing import Any, Protocol, TypeVar

T = TypeVar("T")

_JSON_SCALARS = (dict, list, str, int, float, bool)


class Decoder(Protocol):
    """Turns a response body into an instance of the requested type."""

    def decode(self, data: bytes, type_: type[T]) -> T: ...


class JsonDecoder:
    """
    Decode JSON bodies into plain values, dataclasses, or `from_mapping` types.

    Resolution order for the target type:
    - `typing.Any` / `object`: the parsed JSON value as-is
    - a class exposing `from_mapping(mapping)`: that constructor
    - a dataclass: keyword construction from the JSON object (unknown keys ignored)
    - a JSON builtin (dict, list, str, int, float, bool): isinstance-checked value
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def decode(self, data: bytes, type_: type[T]) -> T:
        value = json.loads(data.decode(self.encoding))
        return self._convert(value, type_)

    def _convert(self, value: Any, type_: Any) -> Any:
        if type_ is Any or type_ is object:
            return value

        from_mapping = getattr(type_, "from_mapping", None)
        if callable(from_mapping):
            if not isinstance(value, Mapping):
                raise TypeError(f"Expected a JSON object for {type_.__name__}, got {type(value).__name__}")
            return from_mapping(value)

        if dataclasses.is_dataclass(type_):
            if not isinstance(value, Mapping):
                raise TypeError(f"Expected a JSON object for {type_.__name__}, got {type(value).__name__}")
            names = {f.name for f in dataclasses.fields(type_) if f.init}
            return type_(**{key: item for key, item in value.items() if key in names})

        if type_ in _JSON_SCALARS:
            # bool is an int subclass; keep ints from decoding as booleans.
            if type_ is int and isinstance(value, bool):
                raise TypeError("Expected int, got bool")
            if type_ is float and isinstance(value, int) and not isinstance(value, bool):
                return float(value)
            if not isinstance(value, type_):
                raise TypeError(f"Expected {type_.__name__}, got {type(value).__name__}")
            return value

        raise TypeError(f"Don't know how to decode JSON into {type_!r}")


__all__ = ["Decoder", "JsonDecoder"]
