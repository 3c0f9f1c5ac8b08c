"""Exception types raised by the browser core."""


class BrowserError(Exception):
    """Base class for every error the browser reports."""


class NetworkError(BrowserError):
    """A request could not be sent or its response could not be read."""


class UnexpectedInputError(BrowserError):
    """Input such as a URL, color or tag name is not supported."""


class InvalidUIError(BrowserError):
    """The user interface could not be drawn or updated."""


class OtherError(BrowserError):
    """Any other failure."""