# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import ssl

import httpx

from restmaker import config
from restmaker.config import DEFAULT_USER_AGENT, Configuration
from restmaker.errors import (
    DecodingError,
    ErrorKind,
    NoDataError,
    RequestCancelledError,
    TransportFailure,
    UnauthorizedError,
    categorize_exception,
    describe_error,
)
from restmaker.rest.endpoint import Endpoint


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("RESTMAKER_HTTP_TIMEOUT", "5.5")
    monkeypatch.setenv("RESTMAKER_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("RESTMAKER_HTTP_REDIRECTS", "false")
    monkeypatch.setenv("RESTMAKER_HTTP_VERIFY_SSL", "0")
    monkeypatch.setenv("RESTMAKER_WARNING_HEADER", "X-App-Warning")

    settings = config.load_http_settings()

    assert settings.timeout == 5.5
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.allow_redirects is False
    assert settings.verify_ssl is False
    assert settings.warning_header == "X-App-Warning"


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("RESTMAKER_HTTP_TIMEOUT", "not-a-number")
    monkeypatch.setenv("RESTMAKER_WARNING_HEADER", "   ")
    monkeypatch.delenv("RESTMAKER_USER_AGENT", raising=False)

    settings = config.load_http_settings()

    assert settings.timeout == config.HttpSettings.timeout
    assert settings.warning_header == config.DEFAULT_WARNING_HEADER
    assert settings.user_agent == DEFAULT_USER_AGENT


def test_load_http_settings_reads_env_at_call_time(monkeypatch):
    monkeypatch.setenv("RESTMAKER_HTTP_TIMEOUT", "7.7")
    assert config.load_http_settings().timeout == 7.7
    monkeypatch.setenv("RESTMAKER_HTTP_TIMEOUT", "8.8")
    assert config.load_http_settings().timeout == 8.8


def test_get_url_joins_base_and_path():
    cfg = Configuration(base_url="https://api.example.com/v1/")
    assert cfg.get_url(Endpoint("/items")) == "https://api.example.com/v1/items"
    assert cfg.get_url(Endpoint("items/1")) == "https://api.example.com/v1/items/1"
    assert cfg.get_url(Endpoint("")) == "https://api.example.com/v1"


def test_categorize_exception_maps_httpx_and_stdlib_errors():
    assert categorize_exception(httpx.ReadTimeout("slow")) is TransportFailure.TIMEOUT
    assert categorize_exception(httpx.ConnectError("refused")) is TransportFailure.CONNECTION_ERROR
    assert categorize_exception(ssl.SSLError("bad cert")) is TransportFailure.SSL_ERROR
    assert categorize_exception(socket.gaierror("no such host")) is TransportFailure.DNS_ERROR
    assert categorize_exception(ConnectionResetError()) is TransportFailure.CONNECTION_ERROR
    assert categorize_exception(RuntimeError("boom")) is TransportFailure.UNKNOWN_ERROR


def test_categorize_exception_looks_through_connect_error_cause():
    try:
        try:
            raise socket.gaierror("no such host")
        except socket.gaierror as inner:
            raise httpx.ConnectError("connect failed") from inner
    except httpx.ConnectError as exc:
        assert categorize_exception(exc) is TransportFailure.DNS_ERROR


def test_errors_carry_kind_and_default_message():
    assert RequestCancelledError().kind is ErrorKind.CANCELLED
    assert str(NoDataError()) == describe_error(ErrorKind.NO_DATA)
    unauthorized = UnauthorizedError(status_code=403)
    assert unauthorized.kind is ErrorKind.UNAUTHORIZED
    assert unauthorized.status_code == 403

    cause = ValueError("bad json")
    decoding = DecodingError(cause, b"{")
    assert decoding.cause is cause
    assert decoding.raw_body == b"{"
    assert "bad json" in str(decoding)


def test_describe_error_handles_unknown_values():
    assert describe_error(None) == ""
    assert describe_error("nope") == "Request failed due to network error"


def test_setup_logging_configures_root_level(monkeypatch):
    import logging

    from restmaker.log import setup_logging

    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    setup_logging("debug")
    assert captured["level"] == logging.DEBUG
    setup_logging("nonsense")
    assert captured["level"] == logging.WARNING
