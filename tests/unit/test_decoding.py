# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json
from dataclasses import dataclass
from typing import Any

import pytest

from restmaker.decoding import JsonDecoder


@dataclass
class Item:
    id: int
    name: str = ""


class Account:
    def __init__(self, email: str):
        self.email = email

    @classmethod
    def from_mapping(cls, data):
        return cls(email=data["email"])


def test_decodes_dataclass_ignoring_unknown_keys():
    item = JsonDecoder().decode(b'{"id": 1, "extra": true}', Item)
    assert item == Item(id=1)


def test_decodes_from_mapping_types():
    account = JsonDecoder().decode(b'{"email": "a@example.com"}', Account)
    assert account.email == "a@example.com"


def test_decodes_builtins_and_any():
    decoder = JsonDecoder()
    assert decoder.decode(b"[1, 2]", list) == [1, 2]
    assert decoder.decode(b"3", float) == 3.0
    assert decoder.decode(b'{"a": 1}', Any) == {"a": 1}


@pytest.mark.parametrize(
    ("payload", "type_", "error"),
    [
        (b"not json", dict, json.JSONDecodeError),
        (b"[1]", Item, TypeError),
        (b'{"name": "x"}', Item, TypeError),
        (b"true", int, TypeError),
        (b'"x"', set, TypeError),
    ],
)
def test_decode_failures_raise(payload, type_, error):
    with pytest.raises(error):
        JsonDecoder().decode(payload, type_)
