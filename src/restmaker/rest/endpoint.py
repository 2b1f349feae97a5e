# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Endpoint paths."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Endpoint:
    """
    A path relative to `Configuration.base_url`.

    Applications usually keep their endpoints as module-level constants or as
    members of an Enum whose values are Endpoints.
    """

    path: str
    requires_authentication: bool = False

    def __str__(self) -> str:
        return self.path


__all__ = ["Endpoint"]
