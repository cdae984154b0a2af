"""Tests for the token cookie helpers."""

from fastapi import Response

from dispatcher.core.modules.user.models import LoginTokens
from dispatcher.web.cookies import clear_token_cookies, set_token_cookies


def test_set_writes_both_cookies():
    response = Response()
    set_token_cookies(response, LoginTokens(access_token="a", refresh_token="r"), secure=True)

    headers = response.headers.getlist("set-cookie")
    assert [header.split(";")[0] for header in headers] == ["access-token=a", "refresh-token=r"]
    assert all("Secure" in header for header in headers)


def test_clear_expires_both_cookies():
    response = Response()
    clear_token_cookies(response)

    headers = response.headers.getlist("set-cookie")
    assert [header.split("=")[0] for header in headers] == ["access-token", "refresh-token"]
    assert all("Max-Age=0" in header for header in headers)
    assert not any("Secure" in header for header in headers)
