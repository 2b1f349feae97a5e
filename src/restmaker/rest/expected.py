# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""What a caller expects back from `RequestMaker.perform`."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class Expect(Enum):
    VOID = "void"
    RAW_BYTES = "raw_bytes"


VOID = Expect.VOID
RAW_BYTES = Expect.RAW_BYTES


@dataclass(frozen=True)
class Typed(Generic[T]):
    """Decode the body into `type_` with the configuration's decoder."""

    type_: type[T] | Any


ExpectedResult = Union[Expect, Typed[Any]]

__all__ = ["Expect", "ExpectedResult", "RAW_BYTES", "Typed", "VOID"]
