import pytest

from saba.errors import NetworkError
from saba.http import Header, HttpResponse


def test_invalid():
    with pytest.raises(NetworkError):
        HttpResponse.parse("HTTP/1.1 200 OK")


def test_status_line_only():
    res = HttpResponse.parse("HTTP/1.1 200 OK\n\n")
    assert res.version == "HTTP/1.1"
    assert res.status_code == 200
    assert res.reason == "OK"


def test_one_header():
    res = HttpResponse.parse("HTTP/1.1 200 OK\nDate:xx xx xx\n\n")
    assert res.version == "HTTP/1.1"
    assert res.status_code == 200
    assert res.reason == "OK"
    assert res.header_value("Date") == "xx xx xx"


def test_two_headers_with_white_space():
    res = HttpResponse.parse("HTTP/1.1 200 OK\nDate: xx xx xx\nContent-Length: 42\n\n")
    assert res.version == "HTTP/1.1"
    assert res.status_code == 200
    assert res.reason == "OK"
    assert res.header_value("Date") == "xx xx xx"
    assert res.header_value("Content-Length") == "42"


def test_body():
    res = HttpResponse.parse("HTTP/1.1 200 OK\nDate: xx xx xx\n\nbody message")
    assert res.version == "HTTP/1.1"
    assert res.status_code == 200
    assert res.reason == "OK"
    assert res.header_value("Date") == "xx xx xx"
    assert res.body == "body message"


def test_crlf_line_endings():
    res = HttpResponse.parse("  HTTP/1.1 200 OK\r\nDate: xx xx xx\r\n\r\nbody message")
    assert res.headers == [Header("Date", "xx xx xx")]
    assert res.body == "body message"


def test_missing_header_raises_key_error():
    res = HttpResponse.parse("HTTP/1.1 200 OK\nDate: xx xx xx\n\n")
    with pytest.raises(KeyError):
        res.header_value("Location")


def test_unparsable_status_code_falls_back_to_404():
    res = HttpResponse.parse("HTTP/1.1 abc OK\n\n")
    assert res.status_code == 404


def test_header_without_colon_is_rejected():
    with pytest.raises(NetworkError):
        HttpResponse.parse("HTTP/1.1 200 OK\nbroken\n\nbody")


def test_redirect_location_header():
    res = HttpResponse.parse("HTTP/1.1 302 Found\nLocation: http://example.com/\n\n")
    assert res.status_code == 302
    assert res.header_value("Location") == "http://example.com/"