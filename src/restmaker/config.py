# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for restmaker."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .decoding import Decoder, JsonDecoder
from .version import __version__

if TYPE_CHECKING:
    from .rest.auth import Authentication
    from .rest.endpoint import Endpoint

DEFAULT_USER_AGENT = f"restmaker/{__version__} (+python-httpx)"
DEFAULT_WARNING_HEADER = "Warning"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """Transport defaults."""

    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True
    warning_header: str = DEFAULT_WARNING_HEADER

    @classmethod
    def from_env(cls) -> HttpSettings:
        """Create settings from environment variables (evaluated at call time)."""
        warning_header = (os.getenv("RESTMAKER_WARNING_HEADER") or "").strip() or cls.warning_header
        return cls(
            timeout=_float_env("RESTMAKER_HTTP_TIMEOUT", cls.timeout),
            user_agent=os.getenv("RESTMAKER_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("RESTMAKER_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("RESTMAKER_HTTP_VERIFY_SSL", cls.verify_ssl),
            warning_header=warning_header,
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


@dataclass
class Configuration:
    """
    Application-owned settings shared by every request descriptor.

    Descriptors hold a reference to one Configuration; nothing in restmaker
    mutates it.
    """

    base_url: str
    default_query_parameters: Mapping[str, Any] = field(default_factory=dict)
    decoder: Decoder = field(default_factory=JsonDecoder)
    default_unauthorized_handler: Callable[[], None] | None = None
    settings: HttpSettings = field(default_factory=load_http_settings)

    def get_url(self, path: Endpoint, authentication: Authentication | None = None) -> str:  # noqa: ARG002
        """
        Resolve the absolute URL for an endpoint.

        The authentication is passed along so subclasses can route credentialed
        calls to a different host; the default ignores it.
        """
        base = str(self.base_url or "").rstrip("/")
        raw_path = str(path).lstrip("/")
        if not raw_path:
            return base
        return f"{base}/{raw_path}"


__all__ = [
    "Configuration",
    "DEFAULT_USER_AGENT",
    "DEFAULT_WARNING_HEADER",
    "HttpSettings",
    "load_http_settings",
]
