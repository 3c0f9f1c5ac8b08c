"""Parsing of plain HTTP URLs."""

from __future__ import annotations

from dataclasses import dataclass

from saba.errors import UnexpectedInputError

_SCHEME = "http://"
_DEFAULT_PORT = "80"


def _strip_scheme(url: str) -> str:
    while url.startswith(_SCHEME):
        url = url[len(_SCHEME):]
    return url


@dataclass(frozen=True)
class Url:
    """An HTTP URL split into host, port, path and search part."""

    url: str
    host: str = ""
    port: str = ""
    path: str = ""
    searchpart: str = ""

    @classmethod
    def parse(cls, url: str) -> Url:
        """Split ``url``; only the http scheme is accepted."""
        if _SCHEME not in url:
            raise UnexpectedInputError("Only HTTP scheme is supported.")

        authority, slash, rest = _strip_scheme(url).partition("/")
        host, colon, port = authority.partition(":")
        if not colon:
            port = _DEFAULT_PORT

        path, searchpart = "", ""
        if slash:
            path, _, searchpart = rest.partition("?")

        return cls(url=url, host=host, port=port, path=path, searchpart=searchpart)