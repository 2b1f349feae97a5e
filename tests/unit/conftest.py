# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from restmaker.config import Configuration, HttpSettings
from restmaker.http.adapters import StubHttpClient
from restmaker.http.cookies import CookieStore
from restmaker.rest.maker import RequestMaker

BASE_URL = "https://api.example.com/v1"


@pytest.fixture
def settings():
    return HttpSettings(timeout=5.0, user_agent="restmaker-tests/1.0")


@pytest.fixture
def configuration(settings):
    return Configuration(base_url=BASE_URL, settings=settings)


@pytest.fixture
def stub():
    return StubHttpClient()


@pytest.fixture
def cookie_store():
    return CookieStore()


@pytest.fixture
def maker(stub, cookie_store):
    return RequestMaker(http_client=stub, cookie_store=cookie_store)
