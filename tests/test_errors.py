import pytest

from saba.errors import (
    BrowserError,
    InvalidUIError,
    NetworkError,
    OtherError,
    UnexpectedInputError,
)


@pytest.mark.parametrize(
    "error_type", [NetworkError, UnexpectedInputError, InvalidUIError, OtherError]
)
def test_every_error_is_a_browser_error(error_type):
    error = error_type("something failed")
    assert str(error) == "something failed"
    assert error.args == ("something failed",)
    assert isinstance(error, BrowserError)


@pytest.mark.parametrize(
    "error_type", [NetworkError, UnexpectedInputError, InvalidUIError, OtherError]
)
def test_every_error_is_caught_as_browser_error(error_type):
    error = error_type("caught")
    try:
        raise error
    except BrowserError as caught:
        assert caught is error
        assert str(caught) == "caught"


def test_error_kinds_are_distinct():
    error = NetworkError("no route")
    assert str(error) == "no route"
    assert not isinstance(error, UnexpectedInputError)
    assert not isinstance(error, InvalidUIError)
    assert not isinstance(error, OtherError)


def test_invalid_ui_error_is_not_network_error():
    error = InvalidUIError("failed to draw a string")
    assert str(error) == "failed to draw a string"
    assert isinstance(error, Exception)
    assert not isinstance(error, NetworkError)