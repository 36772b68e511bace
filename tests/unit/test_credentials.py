"""
Unit tests for AuthGuard.read_credentials (Basic header decoding).

Uses the `guard` fixture and bare Starlette requests, so no app is needed.
"""

import base64

import pytest
from starlette.requests import Request

from httpauth.schemas import Credentials


def _request(header=None) -> Request:
    headers = []
    if header is not None:
        headers.append((b"authorization", header.encode("latin-1")))
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


def _basic(raw: bytes) -> str:
    return "Basic " + base64.b64encode(raw).decode("ascii")


def test_read_valid_header(guard):
    assert guard.read_credentials(_request(_basic(b"bob:right"))) == Credentials(
        username="bob", password="right"
    )


def test_scheme_is_case_insensitive(guard):
    header = _basic(b"bob:right").replace("Basic", "bAsIc")
    assert guard.read_credentials(_request(header)).username == "bob"


def test_password_may_contain_colons(guard):
    creds = guard.read_credentials(_request(_basic(b"bob:a:b:c")))
    assert creds.password == "a:b:c"


def test_empty_username_and_password(guard):
    creds = guard.read_credentials(_request(_basic(b":")))
    assert creds == Credentials(username="", password="")


def test_utf8_credentials(guard):
    creds = guard.read_credentials(_request(_basic("jürgen:pässword".encode("utf-8"))))
    assert creds == Credentials(username="jürgen", password="pässword")


@pytest.mark.parametrize(
    "header",
    [
        None,
        "",
        "Basic",
        "Basic ",
        "Bearer abc.def.ghi",
        "Digest username=\"bob\"",
        "Basic not-base64!!",
        _basic(b"no-separator"),
        _basic(b"\xff\xfe:bad-utf8"),
    ],
)
def test_unreadable_headers_return_none(guard, header):
    assert guard.read_credentials(_request(header)) is None
