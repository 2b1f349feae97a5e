# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

from restmaker.http.cookies import CookieStore, default_cookie_store
from restmaker.http.models import HttpResponse


def test_store_keeps_first_cookie_only():
    store = CookieStore()
    response = HttpResponse(
        ok=True,
        status_code=200,
        url="https://api.example.com/v1/login",
        meta={"set_cookie": ["session=abc; Path=/", "theme=dark; Path=/"]},
    )
    assert store.store_from_response(response) is True
    assert store.get("session") == "abc"
    assert store.get("theme") is None
    assert len(store) == 1


def test_store_falls_back_to_headers():
    store = CookieStore()
    response = HttpResponse(
        ok=True,
        headers={"set-cookie": "token=t1; Path=/v1; HttpOnly"},
        url="https://api.example.com/v1/login",
    )
    assert store.store_from_response(response) is True
    assert store.cookie_header("https://api.example.com/v1/items") == "token=t1"
    assert store.cookie_header("https://api.example.com/other") is None
    assert store.cookie_header("https://elsewhere.example.org/v1/items") is None


def test_store_ignores_missing_cookies_or_unusable_urls(caplog):
    store = CookieStore()
    assert store.store_from_response(HttpResponse(ok=True, url="https://api.example.com/")) is False
    assert store.store_from_response(HttpResponse(ok=True, headers={"Set-Cookie": "a=1"})) is False

    with caplog.at_level(logging.INFO, logger="restmaker.http.cookies"):
        assert store.store("a=1", "http://[::1/") is False
    assert store.store("a=1", "/relative/only") is False
    assert len(store) == 0


def test_max_age_zero_removes_stored_cookie():
    store = CookieStore()
    store.store("session=abc; Path=/", "https://api.example.com/v1/login")
    assert store.cookie_header("https://api.example.com/v1/items") == "session=abc"

    store.store("session=; Path=/; Max-Age=0", "https://api.example.com/v1/logout")
    assert store.get("session") is None
    assert store.cookie_header("https://api.example.com/v1/items") is None


def test_already_expired_cookie_is_not_stored():
    store = CookieStore()
    store.store("session=abc; Path=/; Expires=Thu, 01 Jan 1970 00:00:00 GMT", "https://api.example.com/v1/login")
    assert len(store) == 0
    assert store.cookie_header("https://api.example.com/v1/items") is None


def test_secure_cookie_is_not_replayed_over_plain_http():
    store = CookieStore()
    store.store("sid=1; Path=/; Secure", "https://api.example.com/login")
    assert store.cookie_header("https://api.example.com/items") == "sid=1"
    assert store.cookie_header("http://api.example.com/items") is None


def test_host_only_cookie_replays_on_single_label_host():
    store = CookieStore()
    response = HttpResponse(
        ok=True,
        url="http://localhost:8000/login",
        meta={"set_cookie": ["session=abc; Path=/"]},
    )
    assert store.store_from_response(response) is True
    assert store.cookie_header("http://localhost:8000/items") == "session=abc"


def test_store_honours_cookie_domain_attribute():
    store = CookieStore()
    assert store.store("sid=1; Domain=.example.com; Path=/", "https://api.example.com/login") is True
    assert store.cookie_header("https://www.example.com/") == "sid=1"
    store.clear()
    assert len(store) == 0


def test_default_cookie_store_is_shared():
    assert default_cookie_store() is default_cookie_store()
